"""
HTTP tests for POST /animals.

Run with: pytest tests/test_animals_api.py -v
"""

from fastapi.testclient import TestClient
from adoption_api.config.settings import Config
from adoption_api.domain.value_objects import UserId
from tests.conftest import ALICE, headers_for

FORM = {
    "name": "Rex",
    "type": "dog",
    "gender": "male",
    "race": "labrador",
    "description": "",
}


def picture(name, data):
    return ("pictures", (name, data, "image/jpeg"))


def test_create_animal_with_pictures(client, store, auth_headers):
    res = client.post(
        "/animals",
        headers=auth_headers,
        data=FORM,
        files=[picture("a.jpg", b"bufA"), picture("b.jpg", b"bufB")],
    )

    assert res.status_code == 201, res.text
    body = res.json()
    assert body["name"] == "Rex"
    assert body["user_id"] == ALICE
    assert body["pictures_count"] == 2
    assert len(store.animals) == 1
    assert store.animals[0].user_id == UserId(ALICE)
    assert [data for _, _, data in sorted(store.pictures, key=lambda p: p[1])] == [
        b"bufA",
        b"bufB",
    ]


def test_create_animal_without_pictures(client, store, auth_headers):
    res = client.post("/animals", headers=auth_headers, data=FORM)

    assert res.status_code == 201, res.text
    assert res.json()["pictures_count"] == 0
    assert store.pictures == []


def test_missing_token_never_reaches_the_handler(client, store):
    res = client.post("/animals", data=FORM, files=[picture("a.jpg", b"bufA")])

    assert res.status_code == 401
    assert store.animals == []


def test_invalid_token_is_unauthorized(client, store):
    res = client.post(
        "/animals", headers={"Authorization": "Bearer not-a-jwt"}, data=FORM
    )

    assert res.status_code == 401
    assert store.animals == []


def test_unknown_owner_is_a_bad_request(client, store):
    res = client.post("/animals", headers=headers_for("deleted-user"), data=FORM)

    assert res.status_code == 400
    assert "deleted-user" in res.json()["error"]
    assert store.animals == []


def test_missing_form_field_is_a_validation_error(client, auth_headers):
    incomplete = {k: v for k, v in FORM.items() if k != "name"}

    res = client.post("/animals", headers=auth_headers, data=incomplete)

    assert res.status_code == 400
    assert res.json()["error"] == "Validation error"


def test_too_many_pictures(client, store, auth_headers):
    files = [picture(f"{i}.jpg", b"x") for i in range(Config.MAX_PICTURES + 1)]

    res = client.post("/animals", headers=auth_headers, data=FORM, files=files)

    assert res.status_code == 400
    assert store.animals == []


def test_oversized_picture(client, store, auth_headers):
    too_big = b"0" * (int(Config.MAX_UPLOAD_MB * 1024 * 1024) + 10)

    res = client.post(
        "/animals", headers=auth_headers, data=FORM, files=[picture("big.jpg", too_big)]
    )

    assert res.status_code == 413
    assert store.animals == []


def test_storage_fault_is_a_generic_server_error(app, store, auth_headers, monkeypatch):
    from tests import fakes

    async def explode(self, animal):
        raise fakes.StorageUnavailableError("db host 10.0.0.7 refused connection")

    monkeypatch.setattr(fakes.InMemoryAnimalRepository, "create", explode)
    client = TestClient(app, raise_server_exceptions=False)

    res = client.post("/animals", headers=auth_headers, data=FORM)

    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
