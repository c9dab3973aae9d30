import pytest
from postgrest.exceptions import APIError

from backoffice.services.session import SESSION_KEY


@pytest.mark.django_db
def test_orders_api_returns_orders_and_counts(client, order_factory):
    order_factory("o1", "pendiente", customer="Ana", total=300)
    order_factory("o2", "enviado")
    resp = client.get("/api/orders/", {"status": "pendiente"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "pendiente"
    assert [o["id"] for o in data["orders"]] == ["o1"]
    assert data["orders"][0]["customer_name"] == "Ana"
    assert data["orders"][0]["total_amount"] == 300.0
    assert data["counts"] == {
        "cotizado": 0,
        "pendiente": 1,
        "pagado": 0,
        "enviado": 1,
        "all": 2,
    }


@pytest.mark.django_db
def test_orders_api_failure(client, fake_supabase):
    fake_supabase.errors["orders"] = APIError({"message": "boom"})
    resp = client.get("/api/orders/")
    assert resp.status_code == 502
    assert resp.json() == {"detail": "boom", "status_code": 502}


@pytest.mark.django_db
def test_api_requires_login(client):
    client.logout()
    resp = client.get("/api/orders/")
    assert resp.status_code == 401


@pytest.mark.django_db
def test_expense_api_create_list_delete(client, fake_supabase):
    resp = client.post(
        "/api/expenses/",
        {"description": "Botones", "amount": "45.5", "account": "proveedores"},
        content_type="application/json",
    )
    assert resp.status_code == 201
    created = resp.json()
    assert created["account_label"] == "proveedores"
    assert created["vendedor_id"] == "vendedor-1"

    resp = client.get("/api/expenses/")
    assert [e["id"] for e in resp.json()] == [created["id"]]

    resp = client.delete(f"/api/expenses/{created['id']}/")
    assert resp.status_code == 204
    assert fake_supabase.tables["expenses"] == []


@pytest.mark.django_db
def test_expense_api_validation(client, fake_supabase):
    resp = client.post(
        "/api/expenses/",
        {"description": "Botones", "amount": -1, "account": "proveedores"},
        content_type="application/json",
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Por favor completa todos los campos"
    assert fake_supabase.queries("expenses", "insert") == []


@pytest.mark.django_db
def test_expense_api_without_session_user(client):
    session = client.session
    del session[SESSION_KEY]
    session.save()
    resp = client.post(
        "/api/expenses/",
        {"description": "Botones", "amount": 5, "account": "proveedores"},
        content_type="application/json",
    )
    assert resp.status_code == 403
    assert resp.json()["detail"] == "No hay sesión activa"
