"""
Modelli del database
"""

# Import esplicito dei modelli per assicurare che siano registrati quando l'app importa
from finance_tracker.models.user import User  # noqa: F401
from finance_tracker.models.category import Category  # noqa: F401
from finance_tracker.models.transaction import Transaction  # noqa: F401
