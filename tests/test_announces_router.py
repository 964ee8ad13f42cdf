# /tests/test_announces_router.py

import pytest

PAYLOAD = {
    "title": "Season Finale Tonight",
    "category": "sports",
    "link": "https://example.com/finale",
    "imgUrl": "https://cdn.example.com/finale.png",
}


@pytest.fixture
def created(client):
    response = client.post("/api/announces", json=PAYLOAD)
    assert response.status_code == 201
    return response.json()


def test_create_and_list(client, created):
    assert created["id"] > 0
    assert created["title"] == PAYLOAD["title"]
    assert created["imgUrl"] == PAYLOAD["imgUrl"]

    listing = client.get("/api/announces").json()
    assert [item["id"] for item in listing] == [created["id"]]


def test_optional_fields_may_be_omitted(client):
    response = client.post("/api/announces", json={"title": "Maintenance", "category": "system"})
    assert response.status_code == 201
    assert response.json()["link"] is None
    assert response.json()["imgUrl"] is None


def test_show(client, created):
    response = client.get(f"/api/announces/{created['id']}")
    assert response.status_code == 200
    assert response.json()["category"] == "sports"


def test_update_replaces_fields(client, created):
    update = {"title": "Finale Moved", "category": "sports", "link": None, "imgUrl": None}
    response = client.put(f"/api/announces/{created['id']}", json=update)

    assert response.status_code == 200
    assert response.json()["title"] == "Finale Moved"
    assert response.json()["link"] is None


def test_delete(client, created):
    response = client.delete(f"/api/announces/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Deleted successfully"}
    assert client.get(f"/api/announces/{created['id']}").status_code == 404


@pytest.mark.parametrize(
    "method, body",
    [("get", None), ("put", PAYLOAD), ("delete", None)],
)
def test_missing_announce_is_404(client, method, body):
    kwargs = {"json": body} if body else {}
    response = client.request(method.upper(), "/api/announces/999", **kwargs)
    assert response.status_code == 404
    assert "999" in response.json()["detail"]


@pytest.mark.parametrize(
    "payload",
    [
        {"category": "sports"},
        {"title": "No category"},
        {"title": "x" * 256, "category": "sports"},
        {"title": "Long link", "category": "sports", "link": "y" * 256},
    ],
)
def test_invalid_payload_is_rejected(client, payload):
    assert client.post("/api/announces", json=payload).status_code == 422
