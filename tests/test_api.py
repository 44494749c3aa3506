import pytest
from fastapi.testclient import TestClient

from user_registry.entrypoints.api import app
from user_registry.entrypoints.routers.users import get_store
from user_registry.services.config import settings

URL_PREFIX = settings.USER_REGISTRY_URL_PREFIX.rstrip("/")


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _create(client, **overrides):
    body = {"pseudo": "jdoe", "userName": "John Doe", "avatarURL": "http://x/a.png"}
    body.update(overrides)
    response = client.post(f"{URL_PREFIX}/users", json=body)
    assert response.status_code == 200, response.text
    return response.json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_get_update_delete_flow(client):
    created = _create(client)
    assert created["id"] == "user-0001"
    assert created["referralId"] is None
    assert created["createdAt"] == created["updatedAt"]

    fetched = client.get(f"{URL_PREFIX}/users/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created

    updated = client.put(
        f"{URL_PREFIX}/users/{created['id']}",
        json={"pseudo": "jd", "userName": "John Doe", "avatarURL": "http://x/a.png", "referralId": "ref-1"},
    )
    assert updated.status_code == 200
    body = updated.json()
    assert body["pseudo"] == "jd"
    assert body["referralId"] == "ref-1"
    assert body["createdAt"] == created["createdAt"]
    assert body["updatedAt"] > created["updatedAt"]

    deleted = client.delete(f"{URL_PREFIX}/users/{created['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == body

    missing = client.get(f"{URL_PREFIX}/users/{created['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"detail": f"cannot find user with id {created['id']}"}


def test_list_users(client):
    first = _create(client)
    second = _create(client, pseudo="other", referralId="ref-2")

    response = client.get(f"{URL_PREFIX}/users")

    assert response.status_code == 200
    assert response.json() == {"users": [first, second]}


def test_snake_case_fields_are_accepted(client):
    response = client.post(
        f"{URL_PREFIX}/users",
        json={"pseudo": "snake", "user_name": "Snake Case", "avatar_url": "http://x/s.png", "referral_id": "r"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["userName"] == "Snake Case"
    assert body["avatarURL"] == "http://x/s.png"
    assert body["referralId"] == "r"


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_unknown_user_is_404(client, method):
    kwargs = {}
    if method == "put":
        kwargs["json"] = {"pseudo": "jd", "userName": "John Doe", "avatarURL": "http://x/a.png"}

    response = getattr(client, method)(f"{URL_PREFIX}/users/missing", **kwargs)

    assert response.status_code == 404
    assert response.json()["detail"] == "cannot find user with id missing"


def test_missing_field_is_rejected(client):
    response = client.post(f"{URL_PREFIX}/users", json={"pseudo": "jdoe"})
    assert response.status_code == 422
