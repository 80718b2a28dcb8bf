"""Modello per le transazioni"""
from finance_tracker import db
from datetime import datetime

TRANSACTION_TYPES = ('income', 'expense')


class Transaction(db.Model):
    """Modello per le transazioni finanziarie di un utente"""
    __tablename__ = 'transactions'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    type = db.Column(db.String(20), nullable=False)  # 'income' o 'expense'
    amount = db.Column(db.Numeric(12, 2), nullable=False)
    description = db.Column(db.String(255), nullable=False)
    category_id = db.Column(db.Integer, db.ForeignKey('categories.id'), nullable=True)
    category = db.relationship('Category', backref=db.backref('transactions', lazy=True))
    transaction_date = db.Column(db.Date, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    @property
    def category_name(self):
        return self.category.name if self.category else None

    def __repr__(self):
        return f'<Transaction {self.description}: {self.amount} ({self.type})>'
