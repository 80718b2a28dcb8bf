"""
Utilità comuni per l'applicazione
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from dateutil.parser import isoparse

from finance_tracker.exceptions import ValidationError

CENT = Decimal('0.01')
# Numeric(12, 2): al massimo 10 cifre intere
MAX_AMOUNT = Decimal('9999999999.99')


class ValidationUtils:
    """Utilità per la validazione"""

    @staticmethod
    def validate_amount(amount_str):
        """Valida e converte un importo: Decimal finito, strettamente positivo, al centesimo"""
        try:
            amount = Decimal(str(amount_str).strip().replace(',', '.'))
        except InvalidOperation:
            raise ValidationError('Amount must be a positive number')
        if not amount.is_finite() or amount > MAX_AMOUNT:
            raise ValidationError('Amount must be a positive number')
        amount = amount.quantize(CENT, rounding=ROUND_HALF_UP)
        if amount <= 0:
            raise ValidationError('Amount must be a positive number')
        return amount

    @staticmethod
    def validate_date(date_str):
        """Valida e converte una data ISO (YYYY-MM-DD)"""
        try:
            return isoparse(str(date_str).strip()).date()
        except (ValueError, OverflowError):
            raise ValidationError('Invalid transaction date')

    @staticmethod
    def validate_int(value, message):
        try:
            return int(str(value).strip())
        except (ValueError, TypeError):
            raise ValidationError(message)

    @staticmethod
    def validate_required_fields(form, fields, message='All fields are required'):
        """Restituisce i valori (strip) dei campi obbligatori; uno vuoto solleva ValidationError"""
        values = {}
        for field in fields:
            value = form.get(field)
            if value is None or not str(value).strip():
                raise ValidationError(message)
            values[field] = str(value).strip()
        return values
