"""Configurazione per l'applicazione di tracciamento finanze personali"""
import os
from datetime import timedelta


def _database_uri(base_dir):
    """Costruisce l'URI del database a partire dalle variabili d'ambiente.

    Priorità: `DATABASE_URL`, poi le variabili `POSTGRES_*`, infine un file
    SQLite nella cartella `db/` alla root del repository.
    """
    url = os.environ.get('DATABASE_URL')
    if url:
        return url
    host = os.environ.get('POSTGRES_HOST')
    if host:
        user = os.environ.get('POSTGRES_USER', 'postgres')
        password = os.environ.get('POSTGRES_PASSWORD', '')
        port = os.environ.get('POSTGRES_PORT', '5432')
        database = os.environ.get('POSTGRES_DATABASE', 'finance_tracker')
        return f'postgresql+psycopg2://{user}:{password}@{host}:{port}/{database}'
    return f'sqlite:///{os.path.join(base_dir, "db", "finance.db")}'


class Config:
    """Configurazione principale dell'applicazione"""

    # Database
    BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
    SQLALCHEMY_DATABASE_URI = _database_uri(BASE_DIR)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Flask
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'finance-tracker-dev-secret')

    # Sessione
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)  # Durata sessione: 1 settimana
    SESSION_COOKIE_HTTPONLY = True  # Cookie non accessibile da JavaScript
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Server
    HOST = os.environ.get('APP_HOST', '0.0.0.0')
    PORT = int(os.environ.get('APP_PORT', 3000))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Password hashing (PBKDF2-SHA256)
    PASSWORD_HASH_ITERATIONS = int(os.environ.get('PASSWORD_HASH_ITERATIONS', 600000))

    # Formato valuta usato dal filtro `format_currency`
    CURRENCY_FORMAT = "$ {:,.2f}"


class TestingConfig(Config):
    """Configurazione per la suite di test (SQLite in memoria)"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SECRET_KEY = 'testing-secret'
    PASSWORD_HASH_ITERATIONS = 1000


config = {
    'default': Config,
    'testing': TestingConfig,
}
