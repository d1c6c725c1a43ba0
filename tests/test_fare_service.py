from datetime import date
from unittest.mock import patch

import pytest

from app.core.errors import ComputationError, ConfigurationError, NotFoundError, UpstreamError
from app.models.extra_charge import ExtraCharge
from app.services.car_service import select_vehicle
from app.services.extra_charge_service import find_area_charge
from app.services.fare_calculator import FareRequest
from app.services.fare_service import quote_fare


def request(**overrides):
    data = dict(service_type="door_to_door", pickup_location="1 Main St, Boston, MA",
                dropoff_location="Cambridge, MA", pickup_date=date(2025, 8, 12),
                pickup_time="02:00 PM", adults=2)
    data.update(overrides)
    return FareRequest(**data)


def test_door_to_door_quote(db, provider_factory, make_car, common_settings):
    car = make_car()
    provider = provider_factory(distance=12.0)
    b = quote_fare(db, request(), provider)
    assert provider.calls == [("1 Main St, Boston, MA", "Cambridge, MA")]
    assert b.car_id == car.id
    assert b.base_fare == 52.5
    assert b.total_fare == 60.75


def test_from_airport_resolves_airport(db, provider_factory, make_car, common_settings, airport):
    make_car()
    provider = provider_factory(distance=12.0)
    b = quote_fare(db, request(service_type="from_airport", pickup_location="", airport_id=airport.id), provider)
    assert provider.calls == [(airport.name, "Cambridge, MA")]
    assert b.airport_toll == 7.5


def test_missing_airport_aborts_before_distance(db, provider_factory, make_car, common_settings):
    make_car()
    provider = provider_factory()
    with pytest.raises(NotFoundError):
        quote_fare(db, request(service_type="to_airport", dropoff_location="", airport_id=999), provider)
    assert provider.calls == []


def test_upstream_failure_propagates(db, provider_factory, make_car, common_settings):
    make_car()
    with pytest.raises(UpstreamError):
        quote_fare(db, request(), provider_factory(error=UpstreamError("boom")))


def test_no_settings_row_is_configuration_error(db, provider_factory, make_car):
    make_car()
    with pytest.raises(ConfigurationError):
        quote_fare(db, request(), provider_factory())


def test_no_suitable_car(db, provider_factory, make_car, common_settings):
    make_car(passengers=2)
    with pytest.raises(ComputationError):
        quote_fare(db, request(adults=5), provider_factory())


def test_recompute_flag_uses_settings_charges(db, provider_factory, make_car, common_settings):
    make_car(child_seat=True)
    common_settings.infant_booster_seat_charge = 6.0
    db.commit()
    req = request(children=1, booster_seats=1, booster_price=100.0)
    with patch("app.services.fare_service.settings.RECOMPUTE_SEAT_CHARGES", True):
        b = quote_fare(db, req, provider_factory())
    assert b.child_seat_cost == 6.0


class TestSelectVehicle:
    def test_first_fit_by_id(self, db, make_car):
        small = make_car(name="Small", passengers=2)
        make_car(name="Big", passengers=7)
        assert select_vehicle(db, 2, 0, False).car_id == small.id

    def test_skips_too_small_and_inactive(self, db, make_car):
        make_car(name="Small", passengers=2)
        make_car(name="Retired", passengers=6, status=0)
        big = make_car(name="Big", passengers=6)
        assert select_vehicle(db, 5, 0, False).car_id == big.id

    def test_luggage_counts_small_plus_large(self, db, make_car):
        make_car(name="Tight", small=1, large=1)
        roomy = make_car(name="Roomy", small=2, large=3)
        assert select_vehicle(db, 1, 3, False).car_id == roomy.id

    def test_child_seat_must_match(self, db, make_car):
        plain = make_car(name="Plain", child_seat=False)
        seat = make_car(name="Seat", child_seat=True)
        assert select_vehicle(db, 2, 0, True).car_id == seat.id
        assert select_vehicle(db, 2, 0, False).car_id == plain.id

    def test_returns_slab_table(self, db, make_car):
        make_car()
        quote = select_vehicle(db, 1, 0, False)
        assert sorted((s.slab_value, s.fare_amount) for s in quote.slabs) == [(6, 5.0), (9, 4.0), (100, 3.5)]

    def test_no_match(self, db, make_car):
        make_car(passengers=2)
        with pytest.raises(ComputationError):
            select_vehicle(db, 3, 0, False)


class TestFindAreaCharge:
    def test_area_name_within_location(self, db):
        db.add(ExtraCharge(area_name="Cambridge", zip_codes="02138,02139", extra_charge=4.0, extra_toll_charge=2.5, status=1))
        db.commit()
        charge = find_area_charge(db, "Harvard Square, Cambridge, MA")
        assert charge.extra_charge == 4.0
        assert charge.extra_toll_charge == 2.5

    def test_location_within_area_name(self, db):
        db.add(ExtraCharge(area_name="Cambridge MA", zip_codes="02138", extra_charge=4.0, status=1))
        db.commit()
        assert find_area_charge(db, "cambridge") is not None

    def test_inactive_or_unmatched_is_none(self, db):
        db.add(ExtraCharge(area_name="Cambridge", zip_codes="02138", extra_charge=4.0, status=0))
        db.commit()
        assert find_area_charge(db, "Cambridge, MA") is None
        assert find_area_charge(db, "Quincy, MA") is None
        assert find_area_charge(db, "") is None

    def test_wildcards_in_area_name_match_literally(self, db):
        db.add(ExtraCharge(area_name="Zone_A", zip_codes="02101", extra_charge=9.0, status=1))
        db.add(ExtraCharge(area_name="100% Plaza", zip_codes="02102", extra_charge=7.0, status=1))
        db.commit()
        assert find_area_charge(db, "ZoneXA Street, Boston") is None
        assert find_area_charge(db, "100 Main Plaza, Boston") is None
        assert find_area_charge(db, "12 zone_a Street, Boston").extra_charge == 9.0
        assert find_area_charge(db, "Shops at 100% Plaza").extra_charge == 7.0
