from datetime import date
from decimal import Decimal

from sqlalchemy.exc import OperationalError

from finance_tracker.services.transactions.transactions_service import TransactionService
from tests.conftest import category_id_for, make_transaction, make_user


def seed_income_and_expense(app, user_id):
    make_transaction(app, user_id, type='income', amount=100, description='Paycheck',
                     category='Salary', transaction_date=date(2024, 1, 1))
    make_transaction(app, user_id, type='expense', amount=40, description='Weekly shop',
                     category='Groceries', transaction_date=date(2024, 1, 5))


def test_summary_reflects_all_transactions(app, alice_id):
    seed_income_and_expense(app, alice_id)

    with app.app_context():
        listing = TransactionService().list_transactions(alice_id, '', 'all')

    assert listing['error_message'] is None
    assert listing['stats'] == {
        'total_income': 100,
        'total_expense': 40,
        'balance': 60,
        'transaction_count': 2,
    }


def test_type_filter_restricts_rows_and_summary(app, alice_id):
    seed_income_and_expense(app, alice_id)

    with app.app_context():
        listing = TransactionService().list_transactions(alice_id, '', 'expense')

    assert listing['stats']['transaction_count'] == 1
    assert listing['stats']['total_expense'] == 40
    assert listing['stats']['total_income'] == 0
    assert [t.description for t in listing['transactions']] == ['Weekly shop']


def test_search_matches_description_or_category_case_insensitively(app, alice_id):
    seed_income_and_expense(app, alice_id)

    with app.app_context():
        service = TransactionService()
        by_description = service.list_transactions(alice_id, 'PAYCH', 'all')
        by_category = service.list_transactions(alice_id, 'grocer', 'all')
        combined = service.list_transactions(alice_id, 'shop', 'income')

    assert [t.description for t in by_description['transactions']] == ['Paycheck']
    assert [t.description for t in by_category['transactions']] == ['Weekly shop']
    assert combined['stats']['transaction_count'] == 0


def test_rows_ordered_by_date_then_id_descending(app, alice_id):
    first = make_transaction(app, alice_id, description='first', transaction_date=date(2024, 2, 1))
    second = make_transaction(app, alice_id, description='second', transaction_date=date(2024, 2, 1))
    older = make_transaction(app, alice_id, description='older', transaction_date=date(2023, 12, 31))

    with app.app_context():
        listing = TransactionService().list_transactions(alice_id)

    assert [t.id for t in listing['transactions']] == [second, first, older]


def test_uncategorized_transactions_are_listed(app, alice_id):
    make_transaction(app, alice_id, description='Mystery', category=None)

    with app.app_context():
        listing = TransactionService().list_transactions(alice_id)

    assert listing['transactions'][0].category_name is None
    assert listing['stats']['transaction_count'] == 1


def test_listing_is_scoped_to_the_user(app, alice_id):
    bob_id = make_user(app)
    make_transaction(app, bob_id, type='income', amount=999, description='Bob salary', category='Salary')
    seed_income_and_expense(app, alice_id)

    with app.app_context():
        listing = TransactionService().list_transactions(alice_id, 'salary', 'all')

    assert listing['stats']['transaction_count'] == 1
    assert listing['stats']['total_income'] == 100


def test_database_failure_degrades_to_empty_view(app, alice_id, auth_client, monkeypatch):
    seed_income_and_expense(app, alice_id)

    def broken_query(self, *args, **kwargs):
        raise OperationalError('SELECT', {}, Exception('connection lost'))

    monkeypatch.setattr(TransactionService, 'build_listing_query', broken_query)

    with app.app_context():
        listing = TransactionService().list_transactions(alice_id)
    assert listing['transactions'] == []
    assert listing['stats']['transaction_count'] == 0
    assert listing['stats']['balance'] == 0
    assert listing['error_message'] == 'Error loading transactions'

    response = auth_client.get('/dashboard')
    assert response.status_code == 200
    assert b'Error loading transactions' in response.data
    assert b'connection lost' not in response.data


def test_dashboard_page_renders_listing(app, alice_id, auth_client):
    seed_income_and_expense(app, alice_id)

    response = auth_client.get('/dashboard')

    assert response.status_code == 200
    assert b'Welcome, Alice' in response.data
    assert b'$ 60.00' in response.data
    assert b'Paycheck' in response.data
    assert b'Weekly shop' in response.data


def test_dashboard_page_applies_query_parameters(app, alice_id, auth_client):
    seed_income_and_expense(app, alice_id)

    response = auth_client.get('/dashboard?search=week&type=expense')

    assert b'Weekly shop' in response.data
    assert b'Paycheck' not in response.data
    assert b'value="week"' in response.data


def test_search_treats_like_wildcards_literally(app, alice_id):
    make_transaction(app, alice_id, description='Coffee', category=None)
    make_transaction(app, alice_id, description='50% off', category=None)

    with app.app_context():
        service = TransactionService()
        underscore = service.list_transactions(alice_id, '_', 'all')
        percent = service.list_transactions(alice_id, '%', 'all')
        backslash = service.list_transactions(alice_id, '\\', 'all')

    assert underscore['stats']['transaction_count'] == 0
    assert [t.description for t in percent['transactions']] == ['50% off']
    assert backslash['stats']['transaction_count'] == 0


def test_summary_uses_exact_decimal_arithmetic(app, alice_id, auth_client):
    form = {'type': 'income', 'description': 'tip', 'transaction_date': '2024-01-01',
            'category_id': str(category_id_for(app, 'Salary'))}
    auth_client.post('/add-transaction', data=dict(form, amount='0.1'))
    auth_client.post('/add-transaction', data=dict(form, amount='0.2'))

    with app.app_context():
        stats = TransactionService().list_transactions(alice_id)['stats']

    assert stats['total_income'] == Decimal('0.30')
    assert stats['balance'] == Decimal('0.30')
