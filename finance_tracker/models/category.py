"""Modello per le categorie (dati di riferimento, sola lettura)"""
from finance_tracker import db


class Category(db.Model):
    """Categoria di una transazione"""
    __tablename__ = 'categories'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, unique=True)

    def __repr__(self):
        return f'<Category {self.name}>'
