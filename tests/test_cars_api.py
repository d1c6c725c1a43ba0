import pytest


@pytest.fixture
def slab_ids(client, admin_headers):
    ids = []
    for value in (6, 9, 100):
        r = client.post("/api/v1/slabs", json={"slab_value": value, "slab_unit": 0, "slab_type": 0}, headers=admin_headers)
        ids.append(r.json()["data"]["id"])
    return ids


def create_car(client, headers, **overrides):
    data = {
        "regular_name": "4 Passenger Luxury Vehicle", "short_name": "4pv", "color": "Black",
        "car_photo": "5-8767.webp", "car_features": "GPS", "base_fare": 35, "minimum_fare": 99,
        "small_luggage_capacity": 1, "large_luggage_capacity": 4, "extra_luggage_capacity": 6,
        "num_of_passengers": 4, "is_child_seat": True, "status": 1,
    }
    data.update(overrides)
    return client.post("/api/v1/cars", json=data, headers=headers)


def test_car_crud(client, admin_headers):
    r = create_car(client, admin_headers)
    assert r.status_code == 201
    car_id = r.json()["data"]["id"]

    r = client.put(f"/api/v1/cars/{car_id}", json={"color": "White"}, headers=admin_headers)
    assert r.json()["data"]["color"] == "White"

    assert len(client.get("/api/v1/cars").json()["data"]) == 1
    assert client.delete(f"/api/v1/cars/{car_id}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/v1/cars/{car_id}").status_code == 404


def test_passengers_must_be_positive(client, admin_headers):
    r = create_car(client, admin_headers, num_of_passengers=0)
    assert r.status_code == 422
    assert "num_of_passengers" in r.json()["errors"]


def test_assign_slabs_replaces_existing(client, admin_headers, slab_ids):
    car_id = create_car(client, admin_headers).json()["data"]["id"]
    first = [{"slab_id": sid, "fare_amount": rate, "status": 1} for sid, rate in zip(slab_ids, (5, 4, 3.5))]
    r = client.post(f"/api/v1/cars/{car_id}/slabs", json={"slabs": first}, headers=admin_headers)
    assert r.status_code == 200
    assert len(r.json()["data"]) == 3

    r = client.post(f"/api/v1/cars/{car_id}/slabs", json={"slabs": first[:1]}, headers=admin_headers)
    assert len(r.json()["data"]) == 1

    detail = client.get(f"/api/v1/cars/{car_id}").json()["data"]
    assert len(detail["slab_fares"]) == 1
    assert detail["slab_fares"][0]["slab_value"] == 6.0
    assert detail["slab_fares"][0]["fare_amount"] == 5.0


def test_assign_unknown_slab_is_422(client, admin_headers, slab_ids):
    car_id = create_car(client, admin_headers).json()["data"]["id"]
    r = client.post(f"/api/v1/cars/{car_id}/slabs",
                    json={"slabs": [{"slab_id": 9999, "fare_amount": 5}]}, headers=admin_headers)
    assert r.status_code == 422
    assert "slabs" in r.json()["errors"]


def test_assign_requires_at_least_one(client, admin_headers):
    car_id = create_car(client, admin_headers).json()["data"]["id"]
    r = client.post(f"/api/v1/cars/{car_id}/slabs", json={"slabs": []}, headers=admin_headers)
    assert r.status_code == 422


def test_update_and_delete_slab_fare(client, admin_headers, slab_ids):
    car_id = create_car(client, admin_headers).json()["data"]["id"]
    fares = client.post(f"/api/v1/cars/{car_id}/slabs",
                        json={"slabs": [{"slab_id": slab_ids[0], "fare_amount": 5}]},
                        headers=admin_headers).json()["data"]
    fare_id = fares[0]["id"]

    r = client.put(f"/api/v1/cars/{car_id}/slabs/{fare_id}", json={"fare_amount": 6.25}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["data"]["fare_amount"] == 6.25

    other_car = create_car(client, admin_headers, regular_name="Other").json()["data"]["id"]
    r = client.put(f"/api/v1/cars/{other_car}/slabs/{fare_id}", json={"fare_amount": 1}, headers=admin_headers)
    assert r.status_code == 404

    assert client.delete(f"/api/v1/cars/{car_id}/slabs/{fare_id}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/v1/cars/{car_id}").json()["data"]["slab_fares"] == []
