from .navigation import build_nav
from .services.session import get_session_user


def sidebar(request):
    """Expose sidebar entries and the session user to every template."""
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return {}
    return {
        "nav_items": build_nav(request),
        "session_user": get_session_user(request),
    }
