"""
Blueprint per l'autenticazione
Gestisce registrazione, login e logout
"""
from flask import Blueprint, current_app, redirect, render_template, request, session, url_for

from finance_tracker.exceptions import (
    DuplicateEmailError, InvalidCredentialsError, PersistenceError, ValidationError
)
from finance_tracker.services.auth.auth_service import AuthService
from finance_tracker.utils.access import public

auth_bp = Blueprint('auth', __name__)


def start_session(user):
    """Salva in sessione lo snapshot dell'utente autenticato"""
    session.clear()
    session.permanent = True  # Attiva la durata configurata (7 giorni)
    session['is_logged_in'] = True
    session['user_id'] = user.id
    session['email'] = user.email
    session['name'] = user.name


@auth_bp.route('/login', methods=['GET', 'POST'])
@public
def login():
    if request.method == 'GET':
        if session.get('is_logged_in'):
            return redirect(url_for('dashboard.index'))
        return render_template('login.html', error_message='')

    try:
        user = AuthService().login(request.form.get('email'), request.form.get('password'))
    except (ValidationError, InvalidCredentialsError) as e:
        return render_template('login.html', error_message=e.message)
    except PersistenceError as e:
        current_app.logger.error('Login error: %s', e)
        return render_template('login.html', error_message=e.message)

    start_session(user)
    return redirect(url_for('dashboard.index'))


@auth_bp.route('/signup', methods=['GET', 'POST'])
@public
def signup():
    if request.method == 'GET':
        if session.get('is_logged_in'):
            return redirect(url_for('dashboard.index'))
        return render_template('signup.html', error_message='')

    try:
        AuthService().signup(
            request.form.get('name'),
            request.form.get('email'),
            request.form.get('password'),
        )
    except (ValidationError, DuplicateEmailError, PersistenceError) as e:
        return render_template('signup.html', error_message=e.message)

    return redirect(url_for('auth.login'))


@auth_bp.route('/logout')
@public
def logout():
    session.clear()
    return redirect(url_for('main.index'))
