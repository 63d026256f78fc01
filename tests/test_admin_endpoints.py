"""Tests for admin endpoints."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from nutriplan.api.app import create_app
from nutriplan.containers import AppContainer

HEADERS = {"X-Admin-Token": "admin-token"}


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def test_admin_requires_token(client: TestClient) -> None:
    missing = client.get("/admin/health")
    wrong = client.get("/admin/health", headers={"X-Admin-Token": "nope"})
    ok = client.get("/admin/health", headers=HEADERS)

    assert missing.status_code == 401
    assert wrong.status_code == 401
    assert ok.json() == {"status": "ok"}


def test_admin_users_endpoint(client: TestClient, container: AppContainer) -> None:
    container.user_service.register("Ada", "ada@example.com")

    response = client.get("/admin/users", headers=HEADERS)

    assert response.status_code == 200
    [user] = response.json()["users"]
    assert user["email"] == "ada@example.com"
    assert user["goal"] == "Maintain Weight"


def test_change_role(client: TestClient, container: AppContainer) -> None:
    user = container.user_service.register("Ada", "ada@example.com")

    response = client.post(
        f"/admin/users/{user.id}/role", json={"role": "admin"}, headers=HEADERS
    )

    assert response.status_code == 200
    assert response.json()["role"] == "admin"


def test_delete_user(client: TestClient, container: AppContainer) -> None:
    user = container.user_service.register("Ada", "ada@example.com")
    container.plan_service.set_water(user.id, date(2024, 1, 1), 1.0)

    response = client.delete(f"/admin/users/{user.id}", headers=HEADERS)
    again = client.delete(f"/admin/users/{user.id}", headers=HEADERS)

    assert response.json() == {"success": True}
    assert again.status_code == 404
    assert container.admin_service.get_stats().total_plans == 0


def test_stats_endpoint(client: TestClient, container: AppContainer) -> None:
    user = container.user_service.register("Ada", "ada@example.com")
    container.plan_service.set_water(user.id, date(2024, 1, 1), 2.0)

    response = client.get("/admin/stats", headers=HEADERS)

    assert response.json() == {
        "total_users": 1,
        "total_plans": 1,
        "total_meals": 9,
        "avg_water_l": 2.0,
    }


def test_create_meal(client: TestClient) -> None:
    response = client.post(
        "/admin/meals",
        json={
            "name": "Tofu Stir Fry",
            "meal_type": "Dinner",
            "calories": 510,
            "protein_g": 25,
            "diet_tag": "Vegan",
        },
        headers=HEADERS,
    )
    listed = client.get("/admin/meals", headers=HEADERS)

    assert response.status_code == 201
    assert response.json()["id"] == "persisted:1"
    assert response.json()["image_url"].startswith("https://images.unsplash.com/")
    assert listed.json()["meals"][0]["name"] == "Tofu Stir Fry"


def test_create_meal_validates_payload(client: TestClient) -> None:
    response = client.post(
        "/admin/meals", json={"name": "", "calories": -1}, headers=HEADERS
    )

    assert response.status_code == 422


def test_edit_seed_meal_converts_it(client: TestClient) -> None:
    response = client.put(
        "/admin/meals/seed/m4",
        json={"name": "Chicken Caesar", "calories": 520},
        headers=HEADERS,
    )
    overlay = client.get("/admin/mock-meals/meta", headers=HEADERS)
    meals = client.get("/meals", params={"meal_type": "Lunch"})

    assert response.json()["source"] == "persisted"
    assert overlay.json() == {
        "entries": [{"mock_id": "m4", "deleted": False, "converted_meal_id": 1}]
    }
    names = [meal["name"] for meal in meals.json()["meals"]]
    assert "Grilled Chicken Salad" not in names
    assert names[0] == "Chicken Caesar"


def test_edit_persisted_meal(client: TestClient) -> None:
    client.post("/admin/meals", json={"name": "Soup"}, headers=HEADERS)

    response = client.put(
        "/admin/meals/persisted/1",
        json={"name": "Tomato Soup", "calories": 200},
        headers=HEADERS,
    )

    assert response.json()["id"] == "persisted:1"
    assert response.json()["calories"] == 200


def test_delete_seed_meal(client: TestClient) -> None:
    response = client.delete("/admin/meals/seed/m1", headers=HEADERS)
    again = client.delete("/admin/meals/seed/m1", headers=HEADERS)

    assert response.json() == {"success": True}
    assert again.status_code == 404


def test_missing_meals_are_404(client: TestClient) -> None:
    unknown = client.delete("/admin/meals/persisted/42", headers=HEADERS)
    malformed = client.put(
        "/admin/meals/persisted/abc", json={"name": "X"}, headers=HEADERS
    )
    bad_source = client.delete("/admin/meals/legacy/1", headers=HEADERS)

    assert unknown.status_code == 404
    assert malformed.status_code == 404
    assert bad_source.status_code == 422
