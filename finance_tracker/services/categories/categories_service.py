"""
Servizio per la lettura delle categorie
"""
import logging

from sqlalchemy.exc import SQLAlchemyError

from finance_tracker.defaults import DEFAULT_CATEGORIES
from finance_tracker.exceptions import PersistenceError
from finance_tracker.models.category import Category
from finance_tracker.services import BaseService

logger = logging.getLogger(__name__)


class CategoriesService(BaseService):
    """Servizio per le categorie (dati di riferimento)"""

    def get_all_categories(self):
        """Recupera tutte le categorie ordinate per nome"""
        try:
            return Category.query.order_by(Category.name.asc()).all()
        except SQLAlchemyError as e:
            logger.exception('Categories error: %s', e)
            raise PersistenceError() from e

    def exists(self, category_id):
        try:
            return self.db.session.get(Category, category_id) is not None
        except OverflowError:
            # id fuori dal range di un INTEGER
            return False
        except SQLAlchemyError as e:
            logger.exception('Category lookup failed: %s', e)
            raise PersistenceError() from e

    def seed_defaults(self):
        """Inserisce le categorie predefinite se la tabella è vuota.

        Restituisce il numero di categorie create.
        """
        if Category.query.count() > 0:
            return 0
        for name in DEFAULT_CATEGORIES:
            self.db.session.add(Category(name=name))
        self.commit()
        logger.info('Seeded %d default categories', len(DEFAULT_CATEGORIES))
        return len(DEFAULT_CATEGORIES)
