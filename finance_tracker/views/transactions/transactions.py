"""
Blueprint per le transazioni
Gestisce inserimento, modifica ed eliminazione delle transazioni dell'utente
"""
from flask import Blueprint, current_app, flash, jsonify, redirect, render_template, request, session, url_for

from finance_tracker.exceptions import NotFoundError, PersistenceError, ValidationError
from finance_tracker.services.categories.categories_service import CategoriesService
from finance_tracker.services.transactions.transactions_service import TransactionService

transactions_bp = Blueprint('transactions', __name__)


@transactions_bp.route('/add-transaction', methods=['GET'])
def add_form():
    """Form di inserimento con la lista delle categorie"""
    try:
        categories = CategoriesService().get_all_categories()
    except PersistenceError:
        return redirect(url_for('dashboard.index'))
    return render_template('add_transaction.html', categories=categories)


@transactions_bp.route('/add-transaction', methods=['POST'])
def add():
    try:
        TransactionService().create(session['user_id'], request.form)
    except ValidationError as e:
        return jsonify({'error': e.message}), 400
    except PersistenceError:
        return jsonify({'error': 'Failed to add transaction'}), 500
    flash('Transaction added', 'success')
    return redirect(url_for('dashboard.index'))


@transactions_bp.route('/edit-transaction/<int:transaction_id>', methods=['GET'])
def edit_form(transaction_id):
    """Form di modifica precompilato"""
    try:
        transaction, categories = TransactionService().get_for_edit(transaction_id, session['user_id'])
    except NotFoundError as e:
        return render_template('error.html', message=e.message), 404
    except PersistenceError:
        return redirect(url_for('dashboard.index'))
    return render_template('edit_transaction.html', transaction=transaction, categories=categories)


@transactions_bp.route('/edit-transaction/<int:transaction_id>', methods=['POST'])
def edit(transaction_id):
    try:
        TransactionService().update(transaction_id, session['user_id'], request.form)
    except ValidationError as e:
        return jsonify({'error': e.message}), 400
    except NotFoundError as e:
        return jsonify({'error': e.message}), 404
    except PersistenceError:
        return jsonify({'error': 'Failed to update transaction'}), 500
    flash('Transaction updated', 'success')
    return redirect(url_for('dashboard.index'))


@transactions_bp.route('/delete-transaction/<int:transaction_id>')
def delete(transaction_id):
    try:
        TransactionService().delete(transaction_id, session['user_id'])
    except NotFoundError as e:
        return jsonify({'error': e.message}), 404
    except PersistenceError:
        current_app.logger.error('Delete failed for transaction %s', transaction_id)
        return jsonify({'error': 'Failed to delete transaction'}), 500
    flash('Transaction deleted', 'success')
    return redirect(url_for('dashboard.index'))
