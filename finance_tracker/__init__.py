"""Applicazione Flask per il tracciamento delle finanze personali"""

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from datetime import datetime
import os
from finance_tracker.config import config

# Istanze globali
db = SQLAlchemy()


def create_app(config_name='default'):
    """Factory pattern per creare l'applicazione Flask"""
    # Le directory templates e static sono dentro il modulo
    template_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), 'templates'))
    static_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), 'static'))

    app = Flask(__name__,
                template_folder=template_dir,
                static_folder=static_dir)

    app.config.from_object(config[config_name])

    # Inizializza le estensioni
    db.init_app(app)

    @app.context_processor
    def inject_datetime():
        return {'datetime': datetime}

    @app.context_processor
    def inject_current_user():
        """Inietta nei template lo snapshot dell'utente salvato in sessione."""
        from flask import session
        return {
            'is_logged_in': bool(session.get('is_logged_in')),
            'user_name': session.get('name'),
            'user_email': session.get('email'),
        }

    # Jinja filters (re-uses helpers in finance_tracker.utils.formatting)
    from finance_tracker.utils.formatting import format_currency, format_date
    app.jinja_env.filters['format_currency'] = format_currency
    app.jinja_env.filters['format_date'] = format_date

    # Importa e registra i blueprint
    from finance_tracker.views.main import main_bp
    from finance_tracker.views.auth import auth_bp
    from finance_tracker.views.transactions.dashboard import dashboard_bp
    from finance_tracker.views.transactions.transactions import transactions_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(transactions_bp)

    # Protezione globale: ogni view non marcata come pubblica richiede
    # una sessione autenticata.
    from finance_tracker.utils.access import require_login
    app.before_request(require_login)

    from finance_tracker.commands import init_db_command
    app.cli.add_command(init_db_command)

    # With SQLite (local runs and tests) create the tables on startup.
    # Postgres deployments are provisioned through `flask init-db`.
    db_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    if db_uri.startswith('sqlite:'):
        if db_uri.startswith('sqlite:///'):
            db_path = db_uri[len('sqlite:///'):]
            os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)
        with app.app_context():
            import finance_tracker.models  # noqa: F401 - registra i modelli
            db.create_all()

    return app
