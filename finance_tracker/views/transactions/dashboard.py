"""
Blueprint per la dashboard
Mostra le transazioni dell'utente con ricerca, filtro per tipo e riepilogo
"""
from flask import Blueprint, render_template, request, session

from finance_tracker.services.transactions.transactions_service import FILTER_ALL, TransactionService

dashboard_bp = Blueprint('dashboard', __name__)


@dashboard_bp.route('/dashboard')
def index():
    """Elenco transazioni filtrato; in caso di errore DB mostra una vista vuota"""
    search_term = request.args.get('search', '')
    filter_type = request.args.get('type', FILTER_ALL) or FILTER_ALL

    listing = TransactionService().list_transactions(session['user_id'], search_term, filter_type)

    return render_template(
        'dashboard.html',
        transactions=listing['transactions'],
        stats=listing['stats'],
        error_message=listing['error_message'],
        search_term=search_term,
        filter_type=filter_type,
    )
