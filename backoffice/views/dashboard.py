import logging

from django.shortcuts import render
from django.urls import reverse

from ..filtering import FILTER_CHOICES, StatusFilterState
from ..services import order_service

logger = logging.getLogger(__name__)

STATUS_BADGES = {
    "cotizado": "bg-blue-500/10 text-blue-400",
    "pendiente": "bg-yellow-500/10 text-yellow-400",
    "pagado": "bg-green-500/10 text-green-400",
    "enviado": "bg-accent/10 text-accent",
}


def _filter_chips(state: StatusFilterState, counts=None):
    """Return the status chips; the active chip carries no link."""
    chips = []
    for value, label in FILTER_CHOICES:
        chips.append(
            {
                "value": value,
                "label": label,
                "href": state.set_filter(value),
                "active": value == state.active,
                "count": None if counts is None else counts.get(value, 0),
            }
        )
    return chips


def _dashboard_state(request) -> StatusFilterState:
    return StatusFilterState(reverse("dashboard"), request.META.get("QUERY_STRING", ""))


def dashboard(request):
    """Render the dashboard shell; the order grid is loaded asynchronously.

    GET params:
        status: ``all`` (or absent) or one of the order statuses.
    """
    state = _dashboard_state(request)
    orders_url = reverse("dashboard-orders")
    if state.querystring:
        orders_url = f"{orders_url}?{state.querystring}"
    context = {
        "active_status": state.active,
        "chips": _filter_chips(state),
        "orders_url": orders_url,
    }
    return render(request, "backoffice/dashboard.html", context)


def dashboard_orders(request):
    """HTMX endpoint returning the filter chips with counts and the order grid."""
    state = _dashboard_state(request)
    feed = order_service.OrderFeed()
    feed.settle(state.active)
    context = feed.context()
    context["rows"] = [
        {"order": order, "badge_class": STATUS_BADGES.get(order.status, "")}
        for order in context["orders"]
    ]
    context["chips"] = _filter_chips(state, context["counts"])
    return render(request, "backoffice/_orders.html", context)
