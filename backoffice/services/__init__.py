"""Service layer for orders, expenses and the session user."""

from . import expense_service, order_service, session  # noqa: F401
