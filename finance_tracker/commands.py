"""Comandi CLI (`flask --app run init-db`)"""
import click
from flask.cli import with_appcontext

from finance_tracker import db


def init_database():
    """Crea le tabelle e inserisce le categorie predefinite"""
    import finance_tracker.models  # noqa: F401 - registra i modelli
    from finance_tracker.services.categories.categories_service import CategoriesService

    db.create_all()
    return CategoriesService().seed_defaults()


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Inizializza il database."""
    created = init_database()
    click.echo(f'Database initialized ({created} categories added).')
