"""Eccezioni applicative.

Ogni eccezione porta con sé un messaggio già adatto ad essere mostrato
all'utente; i dettagli tecnici (es. l'errore del database) vanno solo nei log.
"""


class FinanceTrackerError(Exception):
    """Classe base per gli errori dell'applicazione"""
    default_message = 'Something went wrong. Please try again.'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(FinanceTrackerError):
    """Input mancante o non valido"""
    default_message = 'Invalid input'


class DuplicateEmailError(FinanceTrackerError):
    """Email già registrata"""
    default_message = 'Email already exists.'


class InvalidCredentialsError(FinanceTrackerError):
    """Email sconosciuta o password errata (messaggio identico nei due casi)"""
    default_message = 'Invalid email or password'


class NotFoundError(FinanceTrackerError):
    """Risorsa inesistente o appartenente ad un altro utente"""
    default_message = 'Not found'


class PersistenceError(FinanceTrackerError):
    """Errore del database; il dettaglio resta nei log"""
    default_message = 'Database error. Please try again.'
