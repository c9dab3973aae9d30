"""Resolve the user a request acts for.

Two sources are consulted in priority order: the profile served by the data
store, then the session value persisted at login under
:data:`SESSION_KEY`. The resolved user is passed explicitly to whatever needs
it; nothing here is global.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..exceptions import QueryFailure, SessionAbsent
from ..schemas import Profile, SessionUser
from .repositories import ProfileRepository

logger = logging.getLogger(__name__)

SESSION_KEY = "xpresa_session"
SESSION_ABSENT_MESSAGE = "No hay sesión activa"


def _parse_persisted(raw: Optional[str]) -> Optional[SessionUser]:
    if not raw:
        return None
    try:
        user = json.loads(raw)["user"]
        return SessionUser(
            id=str(user["id"]),
            full_name=(user.get("user_metadata") or {}).get("full_name"),
        )
    except (ValueError, KeyError, TypeError):
        logger.error("Error parsing session")
        return None


def resolve_session_user(
    server_profile: Optional[Profile], persisted: Optional[str]
) -> Optional[SessionUser]:
    """Return the session user, preferring ``server_profile`` over ``persisted``."""
    if server_profile is not None:
        return SessionUser(
            id=server_profile.id,
            full_name=server_profile.full_name,
            avatar_url=server_profile.avatar_url,
        )
    return _parse_persisted(persisted)


def persisted_session(user_id: str, full_name: Optional[str]) -> str:
    """Return the JSON value stored in the session at login."""
    return json.dumps({"user": {"id": user_id, "user_metadata": {"full_name": full_name}}})


def remember_user(
    request, user: Any, repository: Optional[ProfileRepository] = None
) -> Optional[SessionUser]:
    """Persist the store profile of ``user`` (a Django user) into the session.

    The profile is matched on ``profiles.username``. Without a matching
    profile nothing is persisted and the request has no session user.
    """
    forget_user(request)
    username = user.get_username()
    repository = repository or ProfileRepository()
    try:
        profile = repository.find_by_username(username)
    except QueryFailure:
        logger.warning("Profile lookup failed for %s", username)
        return None
    if profile is None:
        logger.warning("No profile for user %s", username)
        return None
    full_name = profile.full_name or user.get_full_name() or username
    request.session[SESSION_KEY] = persisted_session(profile.id, full_name)
    return _parse_persisted(request.session[SESSION_KEY])


def forget_user(request) -> None:
    request.session.pop(SESSION_KEY, None)


def load_profile(
    profile_id: Optional[str], repository: Optional[ProfileRepository] = None
) -> Optional[Profile]:
    """Fetch the server-side profile; failures fall back to the session value."""
    if not profile_id:
        return None
    repository = repository or ProfileRepository()
    try:
        return repository.get(profile_id)
    except QueryFailure:
        logger.warning("Profile %s unavailable; using persisted session", profile_id)
        return None


def get_session_user(request) -> Optional[SessionUser]:
    """Return the session user for ``request``, resolving it at most once."""
    if hasattr(request, "_session_user"):
        return request._session_user
    persisted = request.session.get(SESSION_KEY)
    fallback = _parse_persisted(persisted)
    profile = load_profile(fallback.id if fallback else None)
    request._session_user = resolve_session_user(profile, persisted)
    return request._session_user


def require_session_user(user: Optional[SessionUser]) -> SessionUser:
    if user is None:
        raise SessionAbsent(SESSION_ABSENT_MESSAGE)
    return user


__all__ = [
    "SESSION_ABSENT_MESSAGE",
    "SESSION_KEY",
    "forget_user",
    "get_session_user",
    "load_profile",
    "persisted_session",
    "remember_user",
    "require_session_user",
    "resolve_session_user",
]
