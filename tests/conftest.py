import os
import sys
from datetime import datetime, timezone

import django
import pytest

# Ensure project root is on sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "xpresa_site.settings")
django.setup()

from backoffice.services import repositories  # noqa: E402
from backoffice.services.session import SESSION_KEY, persisted_session  # noqa: E402


class DummyResp:
    def __init__(self, data):
        self.data = data


class DummyQuery:
    """Chainable stand-in for a PostgREST query on one table."""

    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.action = "select"
        self.fields = "*"
        self.filters = []
        self.ordering = None
        self.row_limit = None
        self.payload = None

    def select(self, fields):
        self.action = "select"
        self.fields = fields
        return self

    def insert(self, payload):
        self.action = "insert"
        self.payload = payload
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.ordering = (column, desc)
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def _matches(self, row):
        return all(row.get(column) == value for column, value in self.filters)

    def execute(self):
        self.client.executed.append(self)
        error = self.client.errors.get(self.table)
        if error is not None:
            raise error
        rows = self.client.tables.setdefault(self.table, [])
        if self.action == "insert":
            self.client.next_id += 1
            row = {
                "id": f"{self.table}-{self.client.next_id}",
                "created_at": "2026-01-15T10:30:00+00:00",
                **self.payload,
            }
            rows.append(row)
            return DummyResp([row])
        if self.action == "delete":
            removed = [row for row in rows if self._matches(row)]
            self.client.tables[self.table] = [row for row in rows if not self._matches(row)]
            return DummyResp(removed)
        result = [row for row in rows if self._matches(row)]
        if self.ordering:
            column, desc = self.ordering
            result.sort(key=lambda row: row.get(column) or "", reverse=desc)
        if self.row_limit is not None:
            result = result[: self.row_limit]
        if self.fields != "*":
            keys = self.fields.split(",")
            result = [{key: row.get(key) for key in keys} for row in result]
        return DummyResp(result)


class DummyClient:
    """In-memory Supabase client recording every executed query."""

    def __init__(self):
        self.tables = {"orders": [], "expenses": [], "profiles": []}
        self.errors = {}
        self.executed = []
        self.next_id = 0

    def table(self, name):
        return DummyQuery(self, name)

    def queries(self, table, action="select"):
        return [q for q in self.executed if q.table == table and q.action == action]


def make_order(order_id, status, customer="Cliente", total=100.0, day=1):
    return {
        "id": order_id,
        "customer_name": customer,
        "total_amount": total,
        "status": status,
        "created_at": datetime(2026, 1, day, 12, 0, tzinfo=timezone.utc).isoformat(),
    }


@pytest.fixture(autouse=True)
def fake_supabase(monkeypatch):
    """Route every repository to an in-memory client."""
    client = DummyClient()
    monkeypatch.setattr(repositories, "get_supabase_client", lambda: client)
    return client


@pytest.fixture
def order_factory(fake_supabase):
    def create_order(order_id, status, **kwargs):
        row = make_order(order_id, status, **kwargs)
        fake_supabase.tables["orders"].append(row)
        return row

    return create_order


@pytest.fixture(autouse=True)
def logged_in_client(client, db):
    """Log in the default admin user with a persisted session user."""

    from django.contrib.auth import get_user_model

    User = get_user_model()
    user, _ = User.objects.get_or_create(username="admin")
    if not user.has_usable_password():
        user.set_password("admin")
        user.save()
    client.force_login(user)
    session = client.session
    session[SESSION_KEY] = persisted_session("vendedor-1", "Ana Vendedora")
    session.save()
    yield
    client.logout()
