import logging
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional, Tuple

from ..exceptions import QueryFailure, SessionAbsent, ValidationFailure
from ..schemas import Expense, SessionUser
from .repositories import ExpenseRepository
from .session import require_session_user

logger = logging.getLogger(__name__)

ACCOUNT_CHOICES = [
    ("proveedores", "Proveedores"),
    ("alex_banorte", "Alex Banorte"),
    ("xpresa_banregio", "Xpresa Banregio"),
    ("xpresa_hsbc", "Xpresa HSBC"),
    ("mercado_pago_xpresa", "Mercado Pago Xpresa"),
    ("mercado_pago_alex", "Mercado Pago Alex"),
    ("efectivo", "Efectivo"),
]
ACCOUNTS = {value for value, _ in ACCOUNT_CHOICES}

RECENT_LIMIT = 20

MISSING_FIELDS_MESSAGE = "Por favor completa todos los campos"
SAVED_MESSAGE = "Gasto guardado correctamente"
SAVE_ERROR_MESSAGE = "Error al guardar el gasto"
DELETE_ERROR_MESSAGE = "Error al eliminar el gasto"


def clean_expense(description: Any, amount: Any, account: Any) -> Tuple[str, Decimal, str]:
    """Return normalised expense fields or raise :class:`ValidationFailure`.

    Description and account are required, the account must be a known one and
    the amount must be a positive number.
    """
    description = (description or "").strip() if isinstance(description, str) else ""
    account = (account or "").strip() if isinstance(account, str) else ""
    try:
        amount = Decimal(str(amount)) if amount not in (None, "") else Decimal("0")
    except InvalidOperation:
        amount = Decimal("0")
    if not description or not account or not amount.is_finite() or amount <= 0:
        raise ValidationFailure(MISSING_FIELDS_MESSAGE)
    if account not in ACCOUNTS:
        raise ValidationFailure(MISSING_FIELDS_MESSAGE)
    return description, amount, account


def create_expense(
    user: Optional[SessionUser],
    description: Any,
    amount: Any,
    account: Any,
    repository: Optional[ExpenseRepository] = None,
) -> Optional[Expense]:
    """Insert an expense for ``user``.

    Raises :class:`SessionAbsent` without a user, :class:`ValidationFailure`
    for bad input (both before any store call) and :class:`QueryFailure` when
    the insert fails.
    """
    user = require_session_user(user)
    description, amount, account = clean_expense(description, amount, account)
    repository = repository or ExpenseRepository()
    return repository.create(description, float(amount), account, user.id)


def add_expense(
    user: Optional[SessionUser],
    details: dict,
    repository: Optional[ExpenseRepository] = None,
) -> Tuple[bool, str]:
    """Form-friendly wrapper around :func:`create_expense`."""
    try:
        create_expense(
            user,
            details.get("description"),
            details.get("amount"),
            details.get("account"),
            repository=repository,
        )
    except (SessionAbsent, ValidationFailure) as exc:
        return False, exc.message
    except QueryFailure as exc:
        logger.error("Error saving expense: %s", exc)
        return False, exc.message or SAVE_ERROR_MESSAGE
    return True, SAVED_MESSAGE


def list_recent_expenses(
    repository: Optional[ExpenseRepository] = None, limit: int = RECENT_LIMIT
) -> Tuple[List[Expense], Optional[str]]:
    """Return the newest expenses and an error message if the read failed."""
    repository = repository or ExpenseRepository()
    try:
        return repository.recent(limit), None
    except QueryFailure as exc:
        logger.error("Error fetching expenses: %s", exc)
        return [], exc.message


def delete_expense(
    expense_id: str, repository: Optional[ExpenseRepository] = None
) -> Tuple[bool, str]:
    repository = repository or ExpenseRepository()
    try:
        repository.delete(expense_id)
    except QueryFailure as exc:
        logger.error("Error deleting expense %s: %s", expense_id, exc)
        return False, DELETE_ERROR_MESSAGE
    return True, "Gasto eliminado."


__all__ = [
    "ACCOUNT_CHOICES",
    "add_expense",
    "clean_expense",
    "create_expense",
    "delete_expense",
    "list_recent_expenses",
]
