"""Tests for the HTTP endpoints."""

from fastapi.testclient import TestClient

from revisit_admin.api.app import create_app
from revisit_admin.containers import AppContainer


def _signed_in_client(container: AppContainer) -> TestClient:
    client = TestClient(create_app(container))
    response = client.post("/auth/login", json={"email": "a@b.com", "password": "x"})
    assert response.status_code == 200
    return client


def test_health_and_ui(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    assert client.get("/health").json() == {"status": "ok"}
    ui = client.get("/ui")
    assert ui.status_code == 200
    assert "Category Admin" in ui.text


def test_categories_require_session(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    assert client.get("/categories").status_code == 401
    assert client.get("/auth/session").json() == {
        "authenticated": False,
        "user": None,
    }


def test_login_session_and_logout(container: AppContainer) -> None:
    client = _signed_in_client(container)

    session = client.get("/auth/session").json()
    assert session["authenticated"]
    assert session["user"]["name"] == "a"

    assert client.post("/auth/logout").json()["authenticated"] is False
    assert client.get("/categories").status_code == 401


def test_signup(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/auth/signup",
        json={
            "name": "Ada",
            "email": "ada@example.com",
            "password": "secret",
            "confirmPassword": "secret",
        },
    )

    assert response.status_code == 200
    assert response.json()["user"]["name"] == "Ada"


def test_signup_form_errors_block_account_creation(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/auth/signup",
        json={
            "name": "Ada",
            "email": "ada@example.com",
            "password": "pw",
            "confirmPassword": "different",
        },
    )

    assert response.status_code == 422
    assert response.json()["detail"] == {
        "confirm_password": "Passwords do not match",
        "password": "Password must be at least 6 characters",
    }
    assert not container.session_store.is_authenticated
    assert container.notifications.pending() == []
    assert client.get("/auth/session").json()["authenticated"] is False


def test_list_and_search_categories(container: AppContainer) -> None:
    client = _signed_in_client(container)

    everything = client.get("/categories").json()
    assert everything["total"] == 6
    assert everything["loading"] is False
    assert everything["categories"][0]["name"] == "Summer Clothes"

    matches = client.get("/categories", params={"search": "col"}).json()
    assert [row["name"] for row in matches["categories"]] == ["Winter Collection"]
    assert matches["total"] == 6


def test_create_update_delete_flow(container: AppContainer) -> None:
    client = _signed_in_client(container)

    created = client.post(
        "/categories",
        json={"name": "Hats", "itemCount": "4", "imageUrl": "https://x/h.jpg"},
    )
    assert created.status_code == 201
    category_id = created.json()["id"]
    assert client.get(f"/categories/{category_id}").json()["itemCount"] == 4

    updated = client.put(
        f"/categories/{category_id}",
        json={"name": "Caps", "itemCount": 9, "imageUrl": "https://x/h.jpg"},
    )
    assert updated.status_code == 200
    assert updated.json()["name"] == "Caps"
    assert updated.json()["itemCount"] == 9

    assert client.delete(f"/categories/{category_id}").json() == {"status": "ok"}
    assert client.delete(f"/categories/{category_id}").status_code == 200
    assert client.get(f"/categories/{category_id}").status_code == 404


def test_form_errors_are_returned_per_field(container: AppContainer) -> None:
    client = _signed_in_client(container)

    response = client.post("/categories", json={"name": "", "itemCount": "-3"})

    assert response.status_code == 422
    assert response.json()["detail"] == {
        "name": "Category name is required",
        "item_count": "Item count must be a positive number",
        "image_url": "Image URL is required",
    }
    assert len(container.category_store.list()) == 6


def test_update_unknown_category_returns_404(container: AppContainer) -> None:
    client = _signed_in_client(container)

    response = client.put(
        "/categories/missing",
        json={"name": "X", "itemCount": "1", "imageUrl": "https://x"},
    )

    assert response.status_code == 404


def test_image_preview_returns_data_uri(container: AppContainer) -> None:
    client = _signed_in_client(container)

    response = client.post(
        "/categories/image-preview",
        content=b"fake",
        headers={"Content-Type": "image/png"},
    )

    assert response.status_code == 200
    assert response.json() == {"dataUri": "data:image/png;base64,ZmFrZQ=="}

    rejected = client.post(
        "/categories/image-preview",
        content=b"{}",
        headers={"Content-Type": "application/json"},
    )
    assert rejected.status_code == 415


def test_notifications_are_drained(container: AppContainer) -> None:
    client = _signed_in_client(container)

    first = client.get("/notifications").json()["notifications"]
    second = client.get("/notifications").json()["notifications"]

    assert [note["message"] for note in first] == ["Login successful!"]
    assert first[0]["severity"] == "success"
    assert second == []
