"""Order status filter derived from the request location.

The ``status`` query parameter is the only source of the active filter. Code
that wants a different filter asks for a new location with
:meth:`StatusFilterState.set_filter` and the filter is re-derived once that
location is observed; nothing writes the active filter directly.
"""

from __future__ import annotations

from typing import Mapping, Optional
from urllib.parse import parse_qsl, urlencode

from django.db import models

STATUS_PARAM = "status"
ALL = "all"


class OrderStatus(models.TextChoices):
    QUOTED = "cotizado", "Cotizado"
    PENDING = "pendiente", "Pendiente"
    PAID = "pagado", "Pagado"
    SHIPPED = "enviado", "Enviado"


FILTER_CHOICES = [(ALL, "Todos")] + list(OrderStatus.choices)


def explicit_status(query: Mapping[str, str]) -> Optional[str]:
    """Return the stripped ``status`` value, or ``None`` when missing or empty."""
    return (query.get(STATUS_PARAM) or "").strip() or None


def parse_status(query: Mapping[str, str]) -> str:
    """Return the active filter encoded in ``query``.

    A missing or empty ``status`` means ``"all"``. Any other value is returned
    verbatim, including values outside :class:`OrderStatus`.
    """
    return explicit_status(query) or ALL


def build_filter_query(query: Mapping[str, str], new_filter: str) -> str:
    """Return ``query`` urlencoded with ``status`` replaced by ``new_filter``.

    ``"all"`` removes the parameter instead of encoding it. Every other
    parameter is preserved in its original order.
    """
    items = getattr(query, "lists", None)
    if items is not None:
        pairs = [(key, value) for key, values in items() for value in values]
    else:
        pairs = list(query.items())
    pairs = [(key, value) for key, value in pairs if key != STATUS_PARAM]
    if new_filter != ALL:
        pairs.append((STATUS_PARAM, str(new_filter)))
    return urlencode(pairs)


class StatusFilterState:
    """Track the filter encoded in the location of a single page.

    ``active`` has no setter. :meth:`set_filter` only computes the location to
    navigate to; :meth:`observe` is called with the location's query string
    once the navigation has happened and re-derives ``active`` from it.
    """

    def __init__(self, path: str, querystring: str = ""):
        self.path = path
        self._query: dict[str, str] = {}
        self._active = ALL
        self.observe(querystring)

    @property
    def active(self) -> str:
        return self._active

    @property
    def querystring(self) -> str:
        return urlencode(self._query)

    def observe(self, querystring: str) -> str:
        """Settle on the location ``querystring`` and return the active filter."""
        self._query = dict(parse_qsl(querystring or "", keep_blank_values=True))
        self._active = parse_status(self._query)
        return self._active

    def set_filter(self, new_filter: str) -> Optional[str]:
        """Return the location that selects ``new_filter``.

        Returns ``None`` when ``new_filter`` is already active so repeated
        selections neither navigate nor refetch.
        """
        if new_filter == self._active:
            return None
        query = build_filter_query(self._query, new_filter)
        return f"{self.path}?{query}" if query else self.path


__all__ = [
    "ALL",
    "STATUS_PARAM",
    "FILTER_CHOICES",
    "OrderStatus",
    "StatusFilterState",
    "build_filter_query",
    "explicit_status",
    "parse_status",
]
