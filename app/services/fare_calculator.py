"""
Fare engine: turns a resolved booking request plus pricing reference data into an itemized fare.

Everything here is pure. Database and Google lookups happen in fare_service; this module only
receives their results, so the same inputs always give the same breakdown.
"""
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Optional

from app.core.errors import ConfigurationError

SERVICE_DOOR_TO_DOOR = "door_to_door"
SERVICE_FROM_AIRPORT = "from_airport"
SERVICE_TO_AIRPORT = "to_airport"
SERVICE_TYPES = (SERVICE_DOOR_TO_DOOR, SERVICE_FROM_AIRPORT, SERVICE_TO_AIRPORT)

# slabs.slab_type / slabs.slab_unit
SLAB_TYPE_DISTANCE = 0
SLAB_TYPE_HOURLY = 1
SLAB_UNIT_MILE = 0

PICKUP_TIME_FORMAT = "%I:%M %p"
WINDOW_TIME_FORMATS = ("%H:%M", "%H:%M:%S")


@dataclass(frozen=True)
class FareRequest:
    service_type: str
    pickup_location: str
    dropoff_location: str
    pickup_date: date
    pickup_time: str  # "hh:mm AM"
    adults: int
    children: int = 0
    luggage: int = 0
    front_infant_seats: int = 0
    rear_infant_seats: int = 0
    booster_seats: int = 0
    stop_overs: int = 0
    airport_id: Optional[int] = None
    # Client-computed amounts
    front_price: float = 0.0
    rear_price: float = 0.0
    booster_price: float = 0.0
    stopover_price: float = 0.0

    @property
    def passengers(self) -> int:
        return self.adults + self.children

    @property
    def needs_child_seat(self) -> bool:
        return self.children > 0


@dataclass(frozen=True)
class SlabRate:
    slab_value: float
    fare_amount: float
    slab_type: int = SLAB_TYPE_DISTANCE
    slab_unit: int = SLAB_UNIT_MILE
    active: bool = True


@dataclass(frozen=True)
class PricingSettings:
    """Typed view of the common_settings row; every surcharge is optional and defaults to off."""
    gratuity: float = 0.0
    tunnel_charge: float = 0.0
    holidays: frozenset = field(default_factory=frozenset)
    holiday_surcharge: float = 0.0
    night_charge: float = 0.0
    night_charge_start_time: Optional[str] = None
    night_charge_end_time: Optional[str] = None
    hidden_night_charge: float = 0.0
    hidden_night_charge_start_time: Optional[str] = None
    hidden_night_charge_end_time: Optional[str] = None
    stop_over_charge: float = 0.0
    infant_front_facing_seat_charge: float = 0.0
    infant_rear_facing_seat_charge: float = 0.0
    infant_booster_seat_charge: float = 0.0
    cash_discount: float = 0.0
    paypal_charge: float = 0.0
    square_charge: float = 0.0
    credit_card_charge: float = 0.0


@dataclass(frozen=True)
class AirportToll:
    airport_id: int
    name: str
    from_tax_toll: float = 0.0
    to_tax_toll: float = 0.0


@dataclass(frozen=True)
class RouteMetrics:
    distance: float  # miles, 2dp
    duration: str    # "0 Hours 25 Minutes"


@dataclass(frozen=True)
class AreaCharge:
    area_name: str
    extra_charge: float = 0.0
    extra_toll_charge: float = 0.0


@dataclass(frozen=True)
class VehicleQuote:
    car_id: int
    name: str
    slabs: tuple = ()


@dataclass(frozen=True)
class FareReferenceData:
    route: RouteMetrics
    vehicle: VehicleQuote
    settings: PricingSettings
    airport: Optional[AirportToll] = None
    area_charge: Optional[AreaCharge] = None


@dataclass(frozen=True)
class FareBreakdown:
    service_type: str
    pickup_location: str
    dropoff_location: str
    adults: int
    children: int
    luggage: int
    car_id: int
    car_name: str
    distance: float
    duration: str
    base_fare: float
    airport_toll: float
    total_fare: float
    gratuity: float = 0.0
    tunnel_charge: float = 0.0
    extra_charge: float = 0.0
    extra_toll_charge: float = 0.0
    holiday_charge: float = 0.0
    night_charge: float = 0.0
    hidden_night_charge: float = 0.0
    child_seat_cost: float = 0.0
    stop_over_cost: float = 0.0
    card_payment_total: float = 0.0

    @property
    def passengers(self) -> int:
        return self.adults + self.children

    def to_dict(self) -> dict:
        """Flat response body: money as "$12.50", zero-valued optional lines omitted."""
        out = {
            "service_type": self.service_type,
            "pickup_location": self.pickup_location,
            "dropoff_location": self.dropoff_location,
            "adults": self.adults,
            "children": self.children,
            "passengers": self.passengers,
            "luggage": self.luggage,
            "car_id": self.car_id,
            "car_name": self.car_name,
            "distance": round(self.distance, 2),
            "duration": self.duration,
            "base_fare": format_money(self.base_fare),
            "airport_toll": format_money(self.airport_toll),
        }
        for key in OPTIONAL_LINES:
            value = getattr(self, key)
            if value:
                out[key] = format_money(value)
        out["total_fare"] = format_money(self.total_fare)
        if self.card_payment_total:
            out["card_payment_total"] = format_money(self.card_payment_total)
        return out


OPTIONAL_LINES = (
    "gratuity",
    "tunnel_charge",
    "extra_charge",
    "extra_toll_charge",
    "holiday_charge",
    "night_charge",
    "hidden_night_charge",
    "child_seat_cost",
    "stop_over_cost",
)


def format_money(amount: float) -> str:
    return f"${round(amount, 2):.2f}"


def calculate_distance_fare(distance: float, slabs) -> float:
    """Price a trip by walking the vehicle's distance brackets from 0.

    Each bracket charges its own rate for the miles that fall inside it. Miles beyond the
    highest bracket are charged at that last bracket's rate.
    """
    brackets = sorted(
        (s for s in slabs if s.slab_type == SLAB_TYPE_DISTANCE and s.active),
        key=lambda s: s.slab_value,
    )
    if not brackets:
        raise ConfigurationError("Vehicle has no distance pricing defined.")

    remaining = max(float(distance), 0.0)
    previous_upper = 0.0
    fare = 0.0
    for slab in brackets:
        if remaining <= 0:
            break
        portion = min(remaining, slab.slab_value - previous_upper)
        if portion > 0:
            fare += portion * slab.fare_amount
            remaining -= portion
        previous_upper = slab.slab_value

    if remaining > 0:
        fare += remaining * brackets[-1].fare_amount

    return round(fare, 2)


def _parse_window_time(value: str) -> time:
    for fmt in WINDOW_TIME_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).time()
        except ValueError:
            continue
    raise ValueError(f"unrecognised time {value!r}")


def is_within_window(pickup_time: str, start: Optional[str], end: Optional[str]) -> bool:
    """True when a 12-hour pickup time ("11:30 PM") falls inside a 24-hour window.

    end <= start means the window runs past midnight. Unparseable input never matches.
    """
    if not pickup_time or not start or not end:
        return False
    try:
        pickup_t = datetime.strptime(pickup_time.strip().upper(), PICKUP_TIME_FORMAT).time()
        start_t = _parse_window_time(start)
        end_t = _parse_window_time(end)
    except (ValueError, AttributeError):
        return False

    day = date(2000, 1, 1)
    pickup_dt = datetime.combine(day, pickup_t)
    start_dt = datetime.combine(day, start_t)
    end_dt = datetime.combine(day, end_t)
    if end_dt <= start_dt:
        end_dt += timedelta(days=1)
        if pickup_dt < start_dt:
            pickup_dt += timedelta(days=1)
    return start_dt <= pickup_dt <= end_dt


def airport_toll_for(service_type: str, airport: Optional[AirportToll]) -> float:
    if airport is None:
        return 0.0
    if service_type == SERVICE_FROM_AIRPORT:
        return airport.from_tax_toll
    if service_type == SERVICE_TO_AIRPORT:
        return airport.to_tax_toll
    return 0.0


def effective_locations(request: FareRequest, airport: Optional[AirportToll]) -> tuple[str, str]:
    """Origin/destination for the distance query, with the airport name standing in for its side."""
    origin, destination = request.pickup_location, request.dropoff_location
    if airport is not None:
        if request.service_type == SERVICE_FROM_AIRPORT:
            origin = airport.name
        elif request.service_type == SERVICE_TO_AIRPORT:
            destination = airport.name
    return origin or "", destination or ""


def seat_and_stopover_costs(request: FareRequest, settings: PricingSettings, recompute: bool = False) -> tuple[float, float]:
    if not recompute:
        child_seat = request.front_price + request.rear_price + request.booster_price
        return child_seat, request.stopover_price
    child_seat = (
        request.front_infant_seats * settings.infant_front_facing_seat_charge
        + request.rear_infant_seats * settings.infant_rear_facing_seat_charge
        + request.booster_seats * settings.infant_booster_seat_charge
    )
    return child_seat, request.stop_overs * settings.stop_over_charge


def calculate_fare(request: FareRequest, reference: FareReferenceData, recompute_seat_charges: bool = False) -> FareBreakdown:
    settings = reference.settings
    origin, destination = effective_locations(request, reference.airport)

    airport_toll = airport_toll_for(request.service_type, reference.airport)

    extra_charge = extra_toll = 0.0
    if reference.area_charge is not None:
        extra_charge = reference.area_charge.extra_charge
        extra_toll = reference.area_charge.extra_toll_charge

    base_fare = calculate_distance_fare(reference.route.distance, reference.vehicle.slabs)

    child_seat_cost, stop_over_cost = seat_and_stopover_costs(request, settings, recompute_seat_charges)

    gratuity = base_fare * settings.gratuity / 100 if settings.gratuity > 0 else 0.0
    tunnel = settings.tunnel_charge if settings.tunnel_charge > 0 else 0.0
    holiday = settings.holiday_surcharge if request.pickup_date in settings.holidays else 0.0

    night = 0.0
    if settings.night_charge > 0 and is_within_window(
        request.pickup_time, settings.night_charge_start_time, settings.night_charge_end_time
    ):
        night = settings.night_charge

    hidden_night = 0.0
    if settings.hidden_night_charge > 0 and is_within_window(
        request.pickup_time, settings.hidden_night_charge_start_time, settings.hidden_night_charge_end_time
    ):
        hidden_night = settings.hidden_night_charge

    total = (
        base_fare + gratuity + tunnel + airport_toll + extra_charge + extra_toll
        + holiday + night + hidden_night + child_seat_cost + stop_over_cost
    )

    # Informational only; total_fare stays undiscounted.
    card_total = 0.0
    if settings.credit_card_charge > 0:
        card_total = total - total * settings.credit_card_charge / 100

    return FareBreakdown(
        service_type=request.service_type,
        pickup_location=origin,
        dropoff_location=destination,
        adults=request.adults,
        children=request.children,
        luggage=request.luggage,
        car_id=reference.vehicle.car_id,
        car_name=reference.vehicle.name,
        distance=reference.route.distance,
        duration=reference.route.duration,
        base_fare=base_fare,
        airport_toll=round(airport_toll, 2),
        total_fare=round(total, 2),
        gratuity=round(gratuity, 2),
        tunnel_charge=round(tunnel, 2),
        extra_charge=round(extra_charge, 2),
        extra_toll_charge=round(extra_toll, 2),
        holiday_charge=round(holiday, 2),
        night_charge=round(night, 2),
        hidden_night_charge=round(hidden_night, 2),
        child_seat_cost=round(child_seat_cost, 2),
        stop_over_cost=round(stop_over_cost, 2),
        card_payment_total=round(card_total, 2),
    )
