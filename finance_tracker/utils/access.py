"""Controllo di accesso alle view.

Ogni view è considerata riservata agli utenti autenticati, a meno che non sia
decorata con ``@public``. Il controllo viene eseguito da ``require_login``,
registrato come ``before_request`` nella factory.
"""
from flask import current_app, render_template, request, session

LOGIN_REQUIRED_MESSAGE = 'Please log in to access this page'


def public(view):
    """Marca una view come accessibile senza login"""
    view.is_public = True
    return view


def is_public_endpoint(endpoint):
    if endpoint is None or endpoint == 'static':
        # URL sconosciuti (404) e asset statici
        return True
    view = current_app.view_functions.get(endpoint)
    return getattr(view, 'is_public', False)


def require_login():
    """Blocca le richieste a view riservate quando la sessione non è autenticata"""
    if is_public_endpoint(request.endpoint):
        return None
    if session.get('is_logged_in'):
        return None
    return render_template('login.html', error_message=LOGIN_REQUIRED_MESSAGE)
