from flask import current_app


def format_currency(value, fmt=None):
    """Formatta un valore numerico usando il formato definito in `CURRENCY_FORMAT`."""
    if fmt is None:
        fmt = current_app.config.get('CURRENCY_FORMAT', '$ {:,.2f}')

    # normalize value
    try:
        val = 0.0 if value is None else float(value)
    except (TypeError, ValueError):
        val = 0.0

    return fmt.format(val)


def format_date(value, fmt='%Y-%m-%d'):
    """Formatta una data (usato anche per precompilare gli input type=date)"""
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    return value.strftime(fmt)
