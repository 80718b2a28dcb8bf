from datetime import date

import pytest

from finance_tracker import create_app, db
from finance_tracker.commands import init_database
from finance_tracker.models import Category, Transaction, User
from finance_tracker.services.auth.auth_service import AuthService

PASSWORD = 'correct-horse'


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        init_database()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def signup(client, name='Alice', email='alice@example.com', password=PASSWORD):
    return client.post('/signup', data={'name': name, 'email': email, 'password': password})


def login(client, email='alice@example.com', password=PASSWORD):
    return client.post('/login', data={'email': email, 'password': password})


def make_user(app, name='Bob', email='bob@example.com', password=PASSWORD):
    with app.app_context():
        return AuthService().signup(name, email, password).id


def user_id_for(app, email):
    with app.app_context():
        return User.query.filter_by(email=email).first().id


def category_id_for(app, name):
    with app.app_context():
        return Category.query.filter_by(name=name).first().id


def make_transaction(app, user_id, type='expense', amount=10.0, description='Coffee',
                     category='Dining', transaction_date=date(2024, 1, 15)):
    with app.app_context():
        category_id = Category.query.filter_by(name=category).first().id if category else None
        t = Transaction(
            user_id=user_id,
            type=type,
            amount=amount,
            description=description,
            category_id=category_id,
            transaction_date=transaction_date,
        )
        db.session.add(t)
        db.session.commit()
        return t.id


def get_transaction(app, transaction_id):
    with app.app_context():
        t = db.session.get(Transaction, transaction_id)
        if t is None:
            return None
        return {
            'user_id': t.user_id,
            'type': t.type,
            'amount': t.amount,
            'description': t.description,
            'category_id': t.category_id,
            'transaction_date': t.transaction_date,
        }


def count_transactions(app):
    with app.app_context():
        return Transaction.query.count()


@pytest.fixture
def auth_client(app, client):
    """Client con Alice registrata e loggata"""
    signup(client)
    login(client)
    return client


@pytest.fixture
def alice_id(app, auth_client):
    return user_id_for(app, 'alice@example.com')
