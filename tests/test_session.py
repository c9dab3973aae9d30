import json

from django.test import RequestFactory

from backoffice.schemas import Profile
from backoffice.services import session as session_service
from backoffice.services.session import (
    SESSION_KEY,
    get_session_user,
    persisted_session,
    resolve_session_user,
)


def test_server_profile_wins_over_persisted_session():
    profile = Profile(id="p1", full_name="Perfil", avatar_url="https://img/a.png")
    user = resolve_session_user(profile, persisted_session("p1", "Guardado"))
    assert user.full_name == "Perfil"
    assert user.avatar_url == "https://img/a.png"


def test_persisted_session_is_the_fallback():
    user = resolve_session_user(None, persisted_session("p1", "Guardado"))
    assert user.id == "p1"
    assert user.display_name == "Guardado"


def test_missing_name_displays_vendedor():
    user = resolve_session_user(None, json.dumps({"user": {"id": 7, "user_metadata": {}}}))
    assert user.id == "7"
    assert user.display_name == "Vendedor"


def test_unparseable_session_is_ignored(caplog):
    assert resolve_session_user(None, "{not json") is None
    assert resolve_session_user(None, json.dumps({"usuario": {}})) is None
    assert resolve_session_user(None, None) is None
    assert "Error parsing session" in caplog.text


def _request_with_session(value):
    request = RequestFactory().get("/")
    request.session = {SESSION_KEY: value} if value else {}
    return request


def test_get_session_user_uses_profile_from_store(fake_supabase):
    fake_supabase.tables["profiles"].append(
        {"id": "p1", "full_name": "Desde Supabase", "avatar_url": None, "updated_at": None}
    )
    user = get_session_user(_request_with_session(persisted_session("p1", "Local")))
    assert user.full_name == "Desde Supabase"


def test_get_session_user_resolves_once(monkeypatch):
    calls = []

    def load_profile(profile_id, repository=None):
        calls.append(profile_id)
        return None

    monkeypatch.setattr(session_service, "load_profile", load_profile)
    request = _request_with_session(persisted_session("p1", "Local"))
    assert get_session_user(request).full_name == "Local"
    assert get_session_user(request).full_name == "Local"
    assert calls == ["p1"]


def test_profile_failure_falls_back_to_session(fake_supabase):
    from postgrest.exceptions import APIError

    fake_supabase.errors["profiles"] = APIError({"message": "down"})
    user = get_session_user(_request_with_session(persisted_session("p1", "Local")))
    assert user.full_name == "Local"


def test_no_session_no_user(fake_supabase):
    assert get_session_user(_request_with_session(None)) is None
    assert fake_supabase.executed == []


def test_remember_user_stores_profile_id(fake_supabase, django_user_model):
    fake_supabase.tables["profiles"].append({"id": "p7", "username": "dani", "full_name": "Dani"})
    request = _request_with_session(None)
    user = session_service.remember_user(request, django_user_model(pk=42, username="dani"))
    assert user.id == "p7"
    assert json.loads(request.session[SESSION_KEY])["user"]["id"] == "p7"


def test_remember_user_lookup_failure_persists_nothing(fake_supabase, django_user_model):
    from postgrest.exceptions import APIError

    fake_supabase.errors["profiles"] = APIError({"message": "down"})
    request = _request_with_session(persisted_session("viejo", "Anterior"))
    assert session_service.remember_user(request, django_user_model(pk=42, username="dani")) is None
    assert SESSION_KEY not in request.session
