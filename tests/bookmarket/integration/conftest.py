import pytest
from bookmarket.api import ROUTERS, register_exception_handlers
from fastapi import FastAPI
from fastapi.testclient import TestClient


@pytest.fixture()
def client():
    app = FastAPI()
    for router in ROUTERS:
        app.include_router(router)
    register_exception_handlers(app)
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def admin_headers():
    return {"X-Admin-Token": "test-admin-token"}


@pytest.fixture()
def api_shop(client, admin_headers):
    """Register a shop over HTTP and have the admin approve it."""
    response = client.post(
        "/shops/register",
        json={
            "shop_name": "Booksville",
            "owner_name": "Meera Joshi",
            "phone": "9800000001",
            "password": "shop-pass",
            "city": "Pune",
            "upi_id": "booksville@upi",
        },
    )
    assert response.status_code == 201
    shop_id = response.json()["shop_id"]
    response = client.put(f"/admin/shops/{shop_id}/verify", json={"verified": True}, headers=admin_headers)
    assert response.status_code == 200
    return shop_id


@pytest.fixture()
def api_book(client, api_shop):
    response = client.post(
        "/books",
        json={"shop_id": api_shop, "book_name": "NCERT Physics Part 1", "price": 250.0, "stock": 2, "grade": "11"},
    )
    assert response.status_code == 201
    return response.json()["book_id"]


@pytest.fixture()
def api_student(client):
    response = client.post(
        "/students/register",
        json={"name": "Asha Rao", "phone": "9700000001", "password": "student-pass", "address": "Hostel B"},
    )
    assert response.status_code == 201
    return response.json()["student_id"]
