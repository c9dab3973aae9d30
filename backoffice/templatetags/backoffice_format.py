"""Display formatting for amounts and timestamps."""

from decimal import Decimal, InvalidOperation

from django import template
from django.utils import timezone

register = template.Library()


@register.filter
def currency(value) -> str:
    """Format ``value`` as pesos, e.g. ``$1,234.50``."""
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return ""
    if not amount.is_finite():
        return ""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


@register.filter
def short_datetime(value) -> str:
    """Format a datetime as ``dd/mm/yyyy HH:MM`` in the current time zone."""
    if not value:
        return ""
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return value.strftime("%d/%m/%Y %H:%M")
