"""Servizio per la gestione delle transazioni di un utente.

Ogni query e ogni scrittura è filtrata per ``user_id``: un utente non può
leggere né modificare le transazioni di un altro.
"""
import logging
from decimal import Decimal

from sqlalchemy import or_
from sqlalchemy.orm import contains_eager
from sqlalchemy.exc import SQLAlchemyError

from finance_tracker.exceptions import NotFoundError, PersistenceError, ValidationError
from finance_tracker.models.category import Category
from finance_tracker.models.transaction import Transaction, TRANSACTION_TYPES
from finance_tracker.services import BaseService
from finance_tracker.services.categories.categories_service import CategoriesService
from finance_tracker.utils import ValidationUtils

logger = logging.getLogger(__name__)

FILTER_ALL = 'all'
TRANSACTION_FIELDS = ('type', 'amount', 'description', 'category_id', 'transaction_date')
LIKE_ESCAPE = '\\'


def escape_like(term):
    """Rende letterali i caratteri jolly di LIKE (\\, % e _)"""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace('%', LIKE_ESCAPE + '%')
        .replace('_', LIKE_ESCAPE + '_')
    )


def empty_stats():
    return {
        'total_income': Decimal('0'),
        'total_expense': Decimal('0'),
        'balance': Decimal('0'),
        'transaction_count': 0,
    }


def calculate_stats(transactions):
    """Calcola entrate, uscite e saldo sulle transazioni già filtrate"""
    stats = empty_stats()
    stats['transaction_count'] = len(transactions)
    for t in transactions:
        if t.type == 'income':
            stats['total_income'] += Decimal(t.amount)
        else:
            stats['total_expense'] += Decimal(t.amount)
    stats['balance'] = stats['total_income'] - stats['total_expense']
    return stats


class TransactionService(BaseService):
    """Servizio per la gestione delle transazioni"""

    def __init__(self):
        super().__init__()
        self.categories = CategoriesService()

    def _owned(self, transaction_id, user_id):
        return Transaction.query.filter(
            Transaction.id == transaction_id,
            Transaction.user_id == user_id,
        )

    def build_listing_query(self, user_id, search_term='', filter_type=FILTER_ALL):
        """Query delle transazioni dell'utente con ricerca e filtro per tipo"""
        query = (
            Transaction.query
            .outerjoin(Category, Transaction.category_id == Category.id)
            .options(contains_eager(Transaction.category))
            .filter(Transaction.user_id == user_id)
        )

        if search_term:
            like = f'%{escape_like(search_term)}%'
            query = query.filter(or_(
                Transaction.description.ilike(like, escape=LIKE_ESCAPE),
                Category.name.ilike(like, escape=LIKE_ESCAPE),
            ))

        if filter_type != FILTER_ALL:
            query = query.filter(Transaction.type == filter_type)

        # id desc rende l'ordinamento deterministico a parità di data
        return query.order_by(Transaction.transaction_date.desc(), Transaction.id.desc())

    def list_transactions(self, user_id, search_term='', filter_type=FILTER_ALL):
        """Elenco filtrato delle transazioni con le statistiche di riepilogo.

        Le statistiche riflettono la vista corrente, non i totali storici.
        In caso di errore del database restituisce una vista vuota con
        ``error_message`` valorizzato invece di propagare l'eccezione.
        """
        search_term = (search_term or '').strip()
        filter_type = filter_type or FILTER_ALL
        try:
            transactions = self.build_listing_query(user_id, search_term, filter_type).all()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception('Dashboard error: %s', e)
            return {
                'transactions': [],
                'stats': empty_stats(),
                'error_message': 'Error loading transactions',
            }

        return {
            'transactions': transactions,
            'stats': calculate_stats(transactions),
            'error_message': None,
        }

    def validate_form(self, form):
        """Valida i campi del form e restituisce i valori da salvare"""
        values = ValidationUtils.validate_required_fields(form, TRANSACTION_FIELDS)

        if values['type'] not in TRANSACTION_TYPES:
            raise ValidationError('Type must be income or expense')

        amount = ValidationUtils.validate_amount(values['amount'])
        category_id = ValidationUtils.validate_int(values['category_id'], 'Invalid category')
        transaction_date = ValidationUtils.validate_date(values['transaction_date'])

        if not self.categories.exists(category_id):
            raise ValidationError('Invalid category')

        return {
            'type': values['type'],
            'amount': amount,
            'description': values['description'],
            'category_id': category_id,
            'transaction_date': transaction_date,
        }

    def create(self, user_id, form):
        """Crea una nuova transazione per l'utente"""
        values = self.validate_form(form)
        transaction = Transaction(user_id=user_id, **values)
        self.save(transaction)
        logger.info('Transaction %s created for user %s', transaction.id, user_id)
        return transaction

    def update(self, transaction_id, user_id, form):
        """Aggiorna una transazione; nessuna riga coinvolta -> NotFoundError"""
        values = self.validate_form(form)
        try:
            rows = self._owned(transaction_id, user_id).update(values, synchronize_session=False)
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception('Update transaction error: %s', e)
            raise PersistenceError('Failed to update transaction') from e
        if rows == 0:
            self.db.session.rollback()
            raise NotFoundError('Transaction not found')
        self.commit()
        logger.info('Transaction %s updated by user %s', transaction_id, user_id)
        return rows

    def delete(self, transaction_id, user_id):
        """Elimina una transazione; nessuna riga coinvolta -> NotFoundError"""
        try:
            rows = self._owned(transaction_id, user_id).delete(synchronize_session=False)
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception('Delete transaction error: %s', e)
            raise PersistenceError('Failed to delete transaction') from e
        if rows == 0:
            self.db.session.rollback()
            raise NotFoundError('Transaction not found')
        self.commit()
        logger.info('Transaction %s deleted by user %s', transaction_id, user_id)
        return rows

    def get_for_edit(self, transaction_id, user_id):
        """Transazione dell'utente più la lista categorie per il form di modifica"""
        try:
            transaction = self._owned(transaction_id, user_id).first()
        except SQLAlchemyError as e:
            logger.exception('Edit transaction error: %s', e)
            raise PersistenceError() from e
        if transaction is None:
            raise NotFoundError('Transaction not found')
        return transaction, self.categories.get_all_categories()
