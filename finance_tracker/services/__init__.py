"""
Servizio base per la gestione della business logic
"""
import logging

from sqlalchemy.exc import SQLAlchemyError

from finance_tracker import db
from finance_tracker.exceptions import PersistenceError

__all__ = ['BaseService']

logger = logging.getLogger(__name__)


class BaseService:
    """Classe base per i servizi con metodi comuni"""

    def __init__(self):
        self.db = db

    def save(self, obj):
        """Salva un oggetto nel database"""
        self.db.session.add(obj)
        self.commit()
        return obj

    def commit(self):
        """Esegue il commit; in caso di errore fa rollback e solleva PersistenceError"""
        try:
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception('Commit failed: %s', e)
            raise PersistenceError() from e
