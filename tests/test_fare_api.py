from app.core.errors import UpstreamError

URL = "/api/v1/fare-calculation"


def body(**overrides):
    data = {
        "service_type": "door_to_door",
        "pickup_location": "1 Main St, Boston, MA",
        "dropoff_location": "Cambridge, MA",
        "pickup_date": "2025-08-12",
        "pickup_time": "02:00 PM",
        "adults": 2,
        "children": 0,
        "luggage": 1,
    }
    data.update(overrides)
    return data


def test_fare_breakdown(client, make_car, common_settings):
    car = make_car()
    r = client.post(URL, json=body())
    assert r.status_code == 200
    payload = r.json()
    assert payload["status"] == "success"
    data = payload["data"]
    assert data["car_id"] == car.id
    assert data["base_fare"] == "$52.50"
    assert data["gratuity"] == "$5.25"
    assert data["tunnel_charge"] == "$3.00"
    assert data["airport_toll"] == "$0.00"
    assert data["total_fare"] == "$60.75"
    assert data["distance"] == 12.0
    assert data["duration"] == "0 Hours 25 Minutes"
    assert "holiday_charge" not in data
    assert "night_charge" not in data


def test_night_and_holiday_applied(client, db, make_car, common_settings):
    make_car()
    common_settings.night_charge = 5.0
    common_settings.night_charge_start_time = "22:00"
    common_settings.night_charge_end_time = "06:00"
    common_settings.holidays = '["2025-12-25"]'
    common_settings.holiday_surcharge = 10.0
    db.commit()
    r = client.post(URL, json=body(pickup_date="2025-12-25", pickup_time="11:30 PM"))
    data = r.json()["data"]
    assert data["night_charge"] == "$5.00"
    assert data["holiday_charge"] == "$10.00"
    assert data["total_fare"] == "$75.75"


def test_from_airport(client, make_car, common_settings, airport, distance_provider):
    make_car()
    r = client.post(URL, json=body(service_type="from_airport", pickup_location=None, airport_id=airport.id))
    assert r.status_code == 200
    assert r.json()["data"]["airport_toll"] == "$7.50"
    assert distance_provider.calls[-1][0] == airport.name


def test_unknown_airport_is_404(client, make_car, common_settings):
    make_car()
    r = client.post(URL, json=body(service_type="from_airport", airport_id=4242))
    assert r.status_code == 404
    assert r.json()["status"] == "error"


def test_no_car_is_422(client, make_car, common_settings):
    make_car(passengers=2)
    r = client.post(URL, json=body(adults=6))
    assert r.status_code == 422
    assert r.json()["status"] == "error"


def test_upstream_failure_is_generic_500(client, make_car, common_settings, distance_provider):
    make_car()
    distance_provider.error = UpstreamError("Distance provider timed out.")
    r = client.post(URL, json=body())
    assert r.status_code == 500
    assert r.json() == {"status": "error", "message": "An unexpected error occurred during fare calculation."}


def test_missing_settings_is_generic_500(client, make_car):
    make_car()
    r = client.post(URL, json=body())
    assert r.status_code == 500
    assert r.json()["message"] == "An unexpected error occurred during fare calculation."


class TestValidation:
    def assert_field_error(self, response, field):
        assert response.status_code == 422
        payload = response.json()
        assert payload["status"] == "error"
        assert payload["message"] == "Validation failed."
        assert field in payload["errors"]
        assert isinstance(payload["errors"][field], list)

    def test_unknown_service_type(self, client):
        self.assert_field_error(client.post(URL, json=body(service_type="helicopter")), "service_type")

    def test_adults_required(self, client):
        self.assert_field_error(client.post(URL, json=body(adults=0)), "adults")

    def test_bad_date(self, client):
        self.assert_field_error(client.post(URL, json=body(pickup_date="12/08/2025")), "pickup_date")

    def test_bad_time(self, client):
        self.assert_field_error(client.post(URL, json=body(pickup_time="23:30")), "pickup_time")

    def test_airport_required_for_airport_service(self, client):
        self.assert_field_error(client.post(URL, json=body(service_type="to_airport")), "airport_id")

    def test_locations_required_per_service(self, client):
        r = client.post(URL, json=body(pickup_location="", dropoff_location=""))
        self.assert_field_error(r, "pickup_location")
        assert "dropoff_location" in r.json()["errors"]

    def test_child_seats_required_with_children(self, client):
        self.assert_field_error(client.post(URL, json=body(children=1)), "child_seats")

    def test_seat_types_required(self, client):
        self.assert_field_error(client.post(URL, json=body(children=1, child_seats=1)), "seat_types")

    def test_seat_types_must_sum_to_child_seats(self, client):
        r = client.post(URL, json=body(children=2, child_seats=2, booster_seats=1))
        self.assert_field_error(r, "child_seats")

    def test_valid_children_request(self, client, make_car, common_settings):
        make_car(child_seat=True)
        r = client.post(URL, json=body(children=2, child_seats=2, booster_seats=1, rear_infant_seats=1,
                                       rear_price=10.0, booster_price=5.0))
        assert r.status_code == 200
        assert r.json()["data"]["child_seat_cost"] == "$15.00"
