from datetime import date

import pytest

from app.core.errors import ConfigurationError
from app.services.fare_calculator import (
    AirportToll,
    AreaCharge,
    FareReferenceData,
    FareRequest,
    PricingSettings,
    RouteMetrics,
    SlabRate,
    SLAB_TYPE_HOURLY,
    VehicleQuote,
    calculate_distance_fare,
    calculate_fare,
    format_money,
    is_within_window,
)

SLABS = (SlabRate(6, 5.0), SlabRate(9, 4.0), SlabRate(100, 3.5))


def make_request(**overrides):
    data = dict(
        service_type="door_to_door",
        pickup_location="1 Main St, Boston, MA",
        dropoff_location="Cambridge, MA",
        pickup_date=date(2025, 8, 12),
        pickup_time="02:00 PM",
        adults=2,
    )
    data.update(overrides)
    return FareRequest(**data)


def make_reference(distance=12.0, settings=None, airport=None, area_charge=None, slabs=SLABS):
    return FareReferenceData(
        route=RouteMetrics(distance=distance, duration="0 Hours 25 Minutes"),
        vehicle=VehicleQuote(car_id=1, name="Sedan", slabs=slabs),
        settings=settings or PricingSettings(gratuity=10.0, tunnel_charge=3.0),
        airport=airport,
        area_charge=area_charge,
    )


class TestDistanceFare:
    def test_walks_brackets(self):
        assert calculate_distance_fare(12, SLABS) == 52.5

    def test_within_first_bracket(self):
        assert calculate_distance_fare(4, SLABS) == 20.0

    def test_excess_beyond_last_bracket_uses_last_rate(self):
        assert calculate_distance_fare(150, SLABS) == 535.5
        assert calculate_distance_fare(150, SLABS) - calculate_distance_fare(100, SLABS) == pytest.approx(50 * 3.5)

    def test_unsorted_input_is_sorted(self):
        assert calculate_distance_fare(12, tuple(reversed(SLABS))) == 52.5

    def test_hourly_and_inactive_slabs_ignored(self):
        slabs = SLABS + (SlabRate(2, 50.0, slab_type=SLAB_TYPE_HOURLY), SlabRate(3, 99.0, active=False))
        assert calculate_distance_fare(12, slabs) == 52.5

    def test_zero_distance(self):
        assert calculate_distance_fare(0, SLABS) == 0.0

    def test_rounds_to_cents(self):
        assert calculate_distance_fare(1.333, (SlabRate(10, 3.0),)) == 4.0

    def test_no_distance_slabs_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            calculate_distance_fare(12, ())
        with pytest.raises(ConfigurationError):
            calculate_distance_fare(12, (SlabRate(2, 50.0, slab_type=SLAB_TYPE_HOURLY),))


class TestNightWindow:
    @pytest.mark.parametrize("pickup, expected", [
        ("11:30 PM", True),
        ("12:00 PM", False),
        ("05:59 AM", True),
        ("10:00 PM", True),
        ("06:00 AM", True),
        ("06:01 AM", False),
        ("09:59 PM", False),
    ])
    def test_window_across_midnight(self, pickup, expected):
        assert is_within_window(pickup, "22:00", "06:00") is expected

    def test_same_day_window(self):
        assert is_within_window("10:00 AM", "09:00", "17:00")
        assert not is_within_window("08:59 AM", "09:00", "17:00")
        assert not is_within_window("11:00 PM", "09:00", "17:00")

    def test_accepts_seconds_in_bounds(self):
        assert is_within_window("11:30 PM", "22:00:00", "06:00:00")

    @pytest.mark.parametrize("pickup, start, end", [
        ("23:30", "22:00", "06:00"),
        ("11:30 PM", "late", "06:00"),
        ("11:30 PM", None, "06:00"),
        ("11:30 PM", "22:00", None),
        ("", "22:00", "06:00"),
    ])
    def test_unparseable_never_applies(self, pickup, start, end):
        assert is_within_window(pickup, start, end) is False


class TestCalculateFare:
    def test_end_to_end_door_to_door(self):
        b = calculate_fare(make_request(), make_reference())
        assert b.base_fare == 52.5
        assert b.gratuity == 5.25
        assert b.tunnel_charge == 3.0
        assert b.airport_toll == 0.0
        assert b.total_fare == 60.75

        out = b.to_dict()
        assert out["base_fare"] == "$52.50"
        assert out["gratuity"] == "$5.25"
        assert out["tunnel_charge"] == "$3.00"
        assert out["total_fare"] == "$60.75"
        assert out["airport_toll"] == "$0.00"
        assert out["distance"] == 12.0
        assert out["passengers"] == 2

    def test_same_inputs_same_breakdown(self):
        req, ref = make_request(), make_reference()
        assert calculate_fare(req, ref) == calculate_fare(req, ref)
        assert calculate_fare(req, ref).to_dict() == calculate_fare(req, ref).to_dict()

    def test_zero_components_omitted(self):
        out = calculate_fare(make_request(), make_reference(settings=PricingSettings())).to_dict()
        for key in ("gratuity", "tunnel_charge", "holiday_charge", "night_charge", "hidden_night_charge",
                    "extra_charge", "extra_toll_charge", "child_seat_cost", "stop_over_cost", "card_payment_total"):
            assert key not in out
        for key in ("base_fare", "airport_toll", "total_fare", "distance", "duration"):
            assert key in out

    def test_from_airport_uses_from_toll_and_airport_as_origin(self):
        airport = AirportToll(airport_id=3, name="Logan Airport", from_tax_toll=7.5, to_tax_toll=12.0)
        req = make_request(service_type="from_airport", pickup_location="", airport_id=3)
        b = calculate_fare(req, make_reference(airport=airport))
        assert b.airport_toll == 7.5
        assert b.pickup_location == "Logan Airport"
        assert b.total_fare == 60.75 + 7.5

    def test_to_airport_uses_to_toll_and_airport_as_destination(self):
        airport = AirportToll(airport_id=3, name="Logan Airport", from_tax_toll=7.5, to_tax_toll=12.0)
        req = make_request(service_type="to_airport", dropoff_location="", airport_id=3)
        b = calculate_fare(req, make_reference(airport=airport))
        assert b.airport_toll == 12.0
        assert b.dropoff_location == "Logan Airport"

    def test_area_charge_added(self):
        ref = make_reference(area_charge=AreaCharge("Cambridge", extra_charge=4.0, extra_toll_charge=2.5))
        out = calculate_fare(make_request(), ref).to_dict()
        assert out["extra_charge"] == "$4.00"
        assert out["extra_toll_charge"] == "$2.50"
        assert out["total_fare"] == "$67.25"

    def test_holiday_surcharge(self):
        settings = PricingSettings(holidays=frozenset({date(2025, 12, 25)}), holiday_surcharge=10.0)
        on = calculate_fare(make_request(pickup_date=date(2025, 12, 25)), make_reference(settings=settings))
        off = calculate_fare(make_request(pickup_date=date(2025, 12, 26)), make_reference(settings=settings))
        assert on.holiday_charge == 10.0
        assert off.holiday_charge == 0.0
        assert on.total_fare - off.total_fare == pytest.approx(10.0)

    def test_night_and_hidden_night_are_independent(self):
        settings = PricingSettings(
            night_charge=5.0, night_charge_start_time="22:00", night_charge_end_time="06:00",
            hidden_night_charge=2.0, hidden_night_charge_start_time="00:00", hidden_night_charge_end_time="04:00",
        )
        late = calculate_fare(make_request(pickup_time="11:30 PM"), make_reference(settings=settings))
        assert late.night_charge == 5.0
        assert late.hidden_night_charge == 0.0

        early = calculate_fare(make_request(pickup_time="01:15 AM"), make_reference(settings=settings))
        assert early.night_charge == 5.0
        assert early.hidden_night_charge == 2.0
        assert early.total_fare == pytest.approx(52.5 + 7.0)

    def test_client_seat_amounts_used_as_given(self):
        req = make_request(children=1, booster_seats=1, front_price=10.0, booster_price=5.0, stopover_price=7.0)
        settings = PricingSettings(infant_booster_seat_charge=99.0, stop_over_charge=99.0)
        b = calculate_fare(req, make_reference(settings=settings))
        assert b.child_seat_cost == 15.0
        assert b.stop_over_cost == 7.0

    def test_seat_amounts_recomputed_from_settings(self):
        req = make_request(children=2, front_infant_seats=1, booster_seats=1, stop_overs=2,
                           front_price=1.0, booster_price=1.0, stopover_price=1.0)
        settings = PricingSettings(infant_front_facing_seat_charge=10.0, infant_booster_seat_charge=5.0, stop_over_charge=8.0)
        b = calculate_fare(req, make_reference(settings=settings), recompute_seat_charges=True)
        assert b.child_seat_cost == 15.0
        assert b.stop_over_cost == 16.0

    def test_card_payment_total_is_informational(self):
        settings = PricingSettings(credit_card_charge=10.0)
        b = calculate_fare(make_request(), make_reference(distance=20, settings=settings, slabs=(SlabRate(100, 5.0),)))
        assert b.total_fare == 100.0
        assert b.card_payment_total == 90.0
        assert b.to_dict()["card_payment_total"] == "$90.00"

    def test_gratuity_rounded(self):
        settings = PricingSettings(gratuity=7.0)
        b = calculate_fare(make_request(), make_reference(distance=3.33, settings=settings, slabs=(SlabRate(10, 3.0),)))
        assert b.base_fare == 9.99
        assert b.to_dict()["gratuity"] == "$0.70"


def test_format_money():
    assert format_money(0) == "$0.00"
    assert format_money(42.5) == "$42.50"
    assert format_money(1.005) in ("$1.00", "$1.01")
