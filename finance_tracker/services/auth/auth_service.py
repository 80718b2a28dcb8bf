"""Servizio per registrazione e login degli utenti"""
import logging

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from finance_tracker.exceptions import (
    DuplicateEmailError, InvalidCredentialsError, PersistenceError, ValidationError
)
from finance_tracker.models.user import User
from finance_tracker.services import BaseService
from finance_tracker.services.auth.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)


def normalize_email(email):
    """Email senza spazi e in minuscolo (chiave di login case-insensitive)"""
    return (email or '').strip().lower()


class AuthService(BaseService):
    """Servizio per la gestione degli account"""

    def get_user_by_email(self, email):
        try:
            return User.query.filter_by(email=normalize_email(email)).first()
        except SQLAlchemyError as e:
            logger.exception('User lookup failed: %s', e)
            raise PersistenceError() from e

    def signup(self, name, email, password):
        """Crea un nuovo utente e lo restituisce"""
        name = (name or '').strip()
        email = normalize_email(email)
        password = password or ''

        if not name or not email or not password.strip():
            raise ValidationError('All fields are required.')

        # Controllo rapido: la vera garanzia è l'indice unique su users.email
        if self.get_user_by_email(email) is not None:
            raise DuplicateEmailError('Email already exists.')

        iterations = current_app.config.get('PASSWORD_HASH_ITERATIONS')
        user = User(name=name, email=email, password_hash=hash_password(password, iterations))
        try:
            self.db.session.add(user)
            self.db.session.commit()
        except IntegrityError as e:
            self.db.session.rollback()
            logger.warning('Duplicate signup rejected by unique constraint for email: %s', email)
            raise DuplicateEmailError('Email already exists.') from e
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception('Signup error: %s', e)
            raise PersistenceError() from e

        logger.info('New user created: %s', email)
        return user

    def login(self, email, password):
        """Verifica le credenziali e restituisce l'utente autenticato"""
        email = normalize_email(email)
        password = password or ''

        if not email or not password:
            raise ValidationError('Please enter email and password')

        user = self.get_user_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning('Failed login attempt for email: %s', email)
            raise InvalidCredentialsError('Invalid email or password')

        logger.info('User logged in: %s (ID: %s)', user.email, user.id)
        return user
