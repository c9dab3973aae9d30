"""Sidebar navigation entries and active-link resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional
from urllib.parse import parse_qs, urlsplit

from .filtering import STATUS_PARAM, explicit_status

DASHBOARD_PATH = "/dashboard/"


@dataclass(frozen=True)
class NavTarget:
    """A sidebar link; ``path`` and ``status`` are parsed from ``href``."""

    href: str
    label: str
    icon: str
    path: str = field(init=False)
    status: Optional[str] = field(init=False)

    def __post_init__(self):
        parts = urlsplit(self.href)
        values = parse_qs(parts.query).get(STATUS_PARAM)
        object.__setattr__(self, "path", parts.path)
        object.__setattr__(self, "status", values[0] if values else None)

    @property
    def is_filtered(self) -> bool:
        return self.path == DASHBOARD_PATH


NAV_TARGETS = (
    NavTarget("/dashboard/", "Pedidos", "layout-dashboard"),
    NavTarget("/dashboard/?status=pendiente", "Pendientes", "clock"),
    NavTarget("/dashboard/?status=cotizado", "Cotizados", "file-text"),
    NavTarget("/dashboard/?status=enviado", "Enviados", "truck"),
    NavTarget("/gastos/", "Gastos", "receipt"),
    NavTarget("/dashboard/?status=all", "Todos", "list"),
)


def is_active(target: NavTarget, current_path: str, current_status: Optional[str]) -> bool:
    """Return whether ``target`` matches the current location.

    Dashboard targets compare their encoded status with ``current_status``
    exactly; every other target matches on path alone.
    """
    if current_path != target.path:
        return False
    if target.is_filtered:
        return target.status == current_status
    return True


def resolve_active(
    current_path: str,
    current_status: Optional[str],
    targets: Iterable[NavTarget] = NAV_TARGETS,
) -> Optional[NavTarget]:
    """Return the target to highlight for the current location, if any.

    ``current_status`` is the stripped ``status`` query value, ``None`` when
    the location carries none or an empty one. There is no closest-match
    fallback: a status that no target encodes (such as ``pagado``) highlights
    nothing.
    """
    for target in targets:
        if is_active(target, current_path, current_status):
            return target
    return None


def build_nav(request, targets: Iterable[NavTarget] = NAV_TARGETS) -> List[dict]:
    """Return template-ready sidebar entries for ``request``."""
    targets = list(targets)
    status = explicit_status(request.GET)
    active = resolve_active(request.path, status, targets)
    return [
        {
            "href": target.href,
            "label": target.label,
            "icon": target.icon,
            "active": target is active,
        }
        for target in targets
    ]


__all__ = ["DASHBOARD_PATH", "NAV_TARGETS", "NavTarget", "build_nav", "is_active", "resolve_active"]
