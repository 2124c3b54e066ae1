"""Formatos legibles de fechas y precios apoyados en Babel."""

from decimal import Decimal, InvalidOperation

from babel.core import UnknownLocaleError
from babel.dates import format_datetime
from babel.numbers import format_currency

# Dos espacios entre fecha y hora.
PRETTY_TIME_PATTERN = "MMM dd, yyyy  h:mm a"


def format_timestamp(value, locale: str = "en") -> str:
    """Fecha con mes abreviado y reloj de 12 horas: ``May 06, 2012  1:33 PM``."""

    if value is None:
        return ""
    return format_datetime(value, PRETTY_TIME_PATTERN, locale=locale)


def display_price(value, currency_code: str = "EUR", locale: str = "es_ES"):
    """Convierte importes en cantidades legibles respetando el locale.

    Valores no numéricos se devuelven tal cual para no romper la plantilla.
    """

    try:
        amount = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        return value

    try:
        return format_currency(amount, currency_code, locale=locale)
    except (UnknownLocaleError, ValueError):
        return f"{amount:,.2f} {currency_code}"
