import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from ..exceptions import QueryFailure
from ..filtering import ALL, OrderStatus
from ..schemas import OrderSummary
from .repositories import OrderRepository

logger = logging.getLogger(__name__)

GENERIC_EMPTY_MESSAGE = (
    'Aún no tienes pedidos. Crea tu primer pedido haciendo clic en "Nuevo Pedido".'
)


@dataclass
class OrderListResult:
    """Orders for one filter plus the per-status tally.

    ``error`` holds the user-facing message when the query failed; ``orders``
    is then empty and ``counts`` holds zeros.
    """

    orders: List[OrderSummary] = field(default_factory=list)
    counts: Dict[str, int] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.error is None and not self.orders


def empty_counts() -> Dict[str, int]:
    counts = {status.value: 0 for status in OrderStatus}
    counts[ALL] = 0
    return counts


def status_counts(statuses: List[str]) -> Dict[str, int]:
    """Return the number of orders per status with the total under ``"all"``."""
    counts = empty_counts()
    counts.update(Counter(statuses))
    counts[ALL] = len(statuses)
    return counts


def list_orders(
    status_filter: str, repository: Optional[OrderRepository] = None
) -> OrderListResult:
    """Return orders matching ``status_filter`` and fresh status counts."""
    repository = repository or OrderRepository()
    status = None if status_filter == ALL else status_filter
    try:
        orders = repository.list_by_status(status)
        counts = status_counts(repository.statuses())
    except QueryFailure as exc:
        return OrderListResult(counts=empty_counts(), error=exc.message)
    logger.debug("Loaded %d orders for filter %s", len(orders), status_filter)
    return OrderListResult(orders=orders, counts=counts)


def empty_message(status_filter: str) -> str:
    """Return the empty-state text for ``status_filter``."""
    if status_filter == ALL:
        return GENERIC_EMPTY_MESSAGE
    return f'No hay pedidos con estado "{status_filter}".'


class OrderFeed:
    """Order results for the filter a page has settled on.

    :meth:`settle` fetches at most once per distinct filter; asking again for
    the filter already requested is a no-op. :meth:`receive` stores whatever
    result arrives last, regardless of the filter it was requested for.
    """

    def __init__(self, fetch: Callable[[str], OrderListResult] = list_orders):
        self._fetch = fetch
        self.requested: Optional[str] = None
        self.loading = False
        self.result: Optional[OrderListResult] = None

    def request(self, status_filter: str) -> bool:
        """Mark ``status_filter`` as in flight; return ``False`` for a repeat."""
        if status_filter == self.requested:
            return False
        self.requested = status_filter
        self.loading = True
        return True

    def receive(self, result: OrderListResult) -> None:
        self.result = result
        self.loading = False

    def settle(self, status_filter: str) -> bool:
        """Fetch orders for ``status_filter`` unless it was already requested."""
        if not self.request(status_filter):
            return False
        self.receive(self._fetch(status_filter))
        return True

    def context(self) -> dict:
        """Return template variables describing the current state."""
        result = self.result or OrderListResult(counts=empty_counts())
        status_filter = self.requested or ALL
        return {
            "loading": self.loading,
            "orders": result.orders,
            "counts": result.counts,
            "error": result.error,
            "is_empty": result.is_empty,
            "empty_message": empty_message(status_filter),
            "active_status": status_filter,
        }


__all__ = [
    "GENERIC_EMPTY_MESSAGE",
    "OrderFeed",
    "OrderListResult",
    "empty_counts",
    "empty_message",
    "list_orders",
    "status_counts",
]
