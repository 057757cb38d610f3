import pytest


def test_list_cities_returns_seeded_cities(client):
    response = client.get("/api/cities")
    assert response.status_code == 200
    data = response.json()
    assert [c["id"] for c in data] == [1, 2, 3]
    assert data[0]["name"] == "New York City"


def test_city_representation_uses_camel_case(client):
    data = client.get("/api/cities/1").json()
    assert data["numberOfPointsOfInterest"] == 2
    assert [p["id"] for p in data["pointsOfInterest"]] == [1, 2]
    assert set(data["pointsOfInterest"][0]) == {"id", "name", "description"}


@pytest.mark.parametrize("city_id", [1, 2, 3])
def test_get_city_returns_requested_id(client, city_id):
    response = client.get(f"/api/cities/{city_id}")
    assert response.status_code == 200
    assert response.json()["id"] == city_id


@pytest.mark.parametrize("city_id", [0, 4, 999, -1])
def test_get_unknown_city_returns_404_with_empty_body(client, city_id):
    response = client.get(f"/api/cities/{city_id}")
    assert response.status_code == 404
    assert response.content == b""


def test_get_city_bad_id_returns_400(client):
    response = client.get("/api/cities/not-an-int")
    assert response.status_code == 400
    assert "city_id" in response.json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "cities": 3}
