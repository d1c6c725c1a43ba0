from app import seed
from app.models.airport import Airport
from app.models.car import Car, CarSlabFare
from app.models.common_setting import CommonSetting
from app.models.slab import Slab
from app.models.user import User


def test_seed_is_idempotent(db):
    seed.run(db)
    seed.run(db)

    assert db.query(User).count() == 1
    assert db.query(Airport).count() == len(seed.AIRPORTS)
    assert db.query(Slab).count() == len(seed.SLABS)
    assert db.query(Car).count() == len(seed.CARS)
    assert db.query(CarSlabFare).count() == len(seed.CARS) * len(seed.SLABS)
    assert db.query(CommonSetting).count() == 1


def test_seeded_data_prices_a_trip(client, db):
    seed.run(db)
    r = client.post("/api/v1/fare-calculation", json={
        "service_type": "door_to_door",
        "pickup_location": "Back Bay, Boston, MA",
        "dropoff_location": "Quincy, MA",
        "pickup_date": "2025-06-10",
        "pickup_time": "10:00 AM",
        "adults": 1,
    })
    assert r.status_code == 200
    data = r.json()["data"]
    # Only the 7-passenger car has no child seat; 12 miles over its brackets.
    assert data["car_name"] == "7 Passenger Luxury Vehicle"
    assert data["base_fare"] == "$67.50"
    assert data["gratuity"] == "$6.75"
    assert data["tunnel_charge"] == "$3.00"
    assert data["total_fare"] == "$77.25"
