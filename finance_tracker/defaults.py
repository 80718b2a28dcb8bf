"""
Default data values separated from operational configuration.

Questo modulo contiene valori di 'contenuto' usati dall'app (lista delle
categorie) che non dovrebbero essere miscelati con le impostazioni operative
del runtime (DB, SECRET_KEY, ecc.).
"""

# Categorie predefinite, inserite da `flask init-db` se la tabella è vuota
DEFAULT_CATEGORIES = [
    # Entrate
    'Salary',
    'Freelance',
    'Investments',

    # Uscite
    'Groceries',
    'Rent',
    'Utilities',
    'Transportation',
    'Dining',
    'Entertainment',
    'Healthcare',
    'Shopping',
    'Other',
]
