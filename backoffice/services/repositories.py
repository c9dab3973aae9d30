"""Typed access to the Supabase tables used by the back office.

Each repository wraps one table. Query errors raised by the Supabase client
are logged and re-raised as :class:`~backoffice.exceptions.QueryFailure`
carrying a message that can be shown to the user as-is.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client, SupabaseException

from ..exceptions import QueryFailure
from ..schemas import Expense, OrderSummary, Profile
from .supabase_client import get_supabase_client

logger = logging.getLogger(__name__)

STORE_ERRORS = (APIError, SupabaseException, httpx.HTTPError)

NOT_CONFIGURED_MESSAGE = "La base de datos no está configurada"

ORDER_FIELDS = "id,customer_name,total_amount,status,created_at"


def _error_message(exc: Exception) -> str:
    return getattr(exc, "message", None) or str(exc) or exc.__class__.__name__


class SupabaseRepository:
    """Base class running queries against ``table_name``."""

    table_name = ""

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    def _get_client(self) -> Client:
        client = self._client or get_supabase_client()
        if client is None:
            raise QueryFailure(NOT_CONFIGURED_MESSAGE)
        return client

    def _execute(self, action: str, build: Callable[[Any], Any]) -> List[dict]:
        """Run the query built by ``build`` and return the response rows."""
        client = self._get_client()
        try:
            resp = build(client.table(self.table_name)).execute()
        except STORE_ERRORS as exc:
            logger.exception("Failed to %s %s", action, self.table_name)
            raise QueryFailure(_error_message(exc)) from exc
        return resp.data or []


class OrderRepository(SupabaseRepository):
    table_name = "orders"

    def list_by_status(self, status: Optional[str] = None) -> List[OrderSummary]:
        """Return orders newest first, restricted to ``status`` when given."""

        def build(table):
            query = table.select(ORDER_FIELDS)
            if status is not None:
                query = query.eq("status", status)
            return query.order("created_at", desc=True)

        return [OrderSummary.model_validate(row) for row in self._execute("list", build)]

    def statuses(self) -> List[str]:
        """Return the status of every order."""
        rows = self._execute("count", lambda table: table.select("status"))
        return [row.get("status") for row in rows if row.get("status")]


class ExpenseRepository(SupabaseRepository):
    table_name = "expenses"

    def recent(self, limit: int = 20) -> List[Expense]:
        rows = self._execute(
            "list",
            lambda table: table.select("*").order("created_at", desc=True).limit(limit),
        )
        return [Expense.model_validate(row) for row in rows]

    def create(
        self, description: str, amount: float, account: str, vendedor_id: str
    ) -> Optional[Expense]:
        payload = {
            "description": description,
            "amount": amount,
            "account": account,
            "vendedor_id": vendedor_id,
        }
        rows = self._execute("insert into", lambda table: table.insert(payload))
        return Expense.model_validate(rows[0]) if rows else None

    def delete(self, expense_id: str) -> None:
        self._execute("delete from", lambda table: table.delete().eq("id", expense_id))


class ProfileRepository(SupabaseRepository):
    table_name = "profiles"

    def get(self, profile_id: str) -> Optional[Profile]:
        rows = self._execute(
            "read",
            lambda table: table.select("*").eq("id", profile_id).limit(1),
        )
        return Profile.model_validate(rows[0]) if rows else None

    def find_by_username(self, username: str) -> Optional[Profile]:
        rows = self._execute(
            "read",
            lambda table: table.select("*").eq("username", username).limit(1),
        )
        return Profile.model_validate(rows[0]) if rows else None


__all__ = [
    "ExpenseRepository",
    "OrderRepository",
    "ProfileRepository",
    "STORE_ERRORS",
    "SupabaseRepository",
]
