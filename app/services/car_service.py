import logging

from sqlalchemy.orm import Session

from app.core.errors import ComputationError, NotFoundError, ValidationError
from app.models.car import Car, CarSlabFare
from app.models.slab import Slab
from app.schemas.car import AssignSlabsIn, CarIn, CarPatch, CarSlabFarePatch
from app.services.crud import apply_patch, get_or_404
from app.services.fare_calculator import SlabRate, VehicleQuote

logger = logging.getLogger(__name__)


def create_car(db: Session, body: CarIn) -> Car:
    c = Car(**body.model_dump())
    db.add(c)
    db.commit()
    db.refresh(c)
    return c


def update_car(db: Session, car_id: int, body: CarPatch) -> Car:
    c = get_or_404(db, Car, car_id, "Car")
    apply_patch(c, body)
    db.commit()
    db.refresh(c)
    return c


def delete_car(db: Session, car_id: int) -> None:
    c = get_or_404(db, Car, car_id, "Car")
    db.delete(c)
    db.commit()


def slab_fare_dict(f: CarSlabFare) -> dict:
    return {
        "id": f.id,
        "car_id": f.car_id,
        "slab_id": f.slab_id,
        "fare_amount": float(f.fare_amount),
        "status": f.status,
        "slab_value": float(f.slab.slab_value) if f.slab else None,
        "slab_unit": f.slab.slab_unit if f.slab else None,
        "slab_type": f.slab.slab_type if f.slab else None,
    }


def assign_slabs(db: Session, car_id: int, body: AssignSlabsIn) -> list[CarSlabFare]:
    """Replace every slab fare of the car with the given set."""
    car = get_or_404(db, Car, car_id, "Car")
    slab_ids = {a.slab_id for a in body.slabs}
    found = {s.id for s in db.query(Slab.id).filter(Slab.id.in_(slab_ids)).all()}
    missing = sorted(slab_ids - found)
    if missing:
        raise ValidationError(errors={"slabs": [f"Slab ID {sid} does not exist." for sid in missing]})

    car.slab_fares.clear()
    db.flush()
    for a in body.slabs:
        car.slab_fares.append(CarSlabFare(slab_id=a.slab_id, fare_amount=a.fare_amount, status=a.status))
    db.commit()
    db.refresh(car)
    logger.info("Assigned %d slab fares to car %s", len(body.slabs), car.id)
    return list(car.slab_fares)


def _get_slab_fare(db: Session, car_id: int, slab_fare_id: int) -> CarSlabFare:
    get_or_404(db, Car, car_id, "Car")
    f = db.get(CarSlabFare, slab_fare_id)
    if f is None or f.car_id != car_id:
        raise NotFoundError(f"Slab fare with ID {slab_fare_id} not found for car {car_id}.")
    return f


def update_slab_fare(db: Session, car_id: int, slab_fare_id: int, body: CarSlabFarePatch) -> CarSlabFare:
    f = _get_slab_fare(db, car_id, slab_fare_id)
    apply_patch(f, body)
    db.commit()
    db.refresh(f)
    return f


def delete_slab_fare(db: Session, car_id: int, slab_fare_id: int) -> None:
    f = _get_slab_fare(db, car_id, slab_fare_id)
    db.delete(f)
    db.commit()


def select_vehicle(db: Session, passengers: int, luggage: int, needs_child_seat: bool) -> VehicleQuote:
    """First active car (by id) that fits the party, with its slab fare table."""
    car = (
        db.query(Car)
        .filter(Car.status == 1)
        .filter(Car.num_of_passengers >= passengers)
        .filter((Car.small_luggage_capacity + Car.large_luggage_capacity) >= luggage)
        .filter(Car.is_child_seat == needs_child_seat)
        .order_by(Car.id.asc())
        .first()
    )
    if car is None:
        raise ComputationError("No suitable car found for the requested passengers and luggage.")
    slabs = tuple(
        SlabRate(
            slab_value=float(f.slab.slab_value),
            fare_amount=float(f.fare_amount),
            slab_type=f.slab.slab_type,
            slab_unit=f.slab.slab_unit,
            active=f.status == 1 and f.slab.status == 1,
        )
        for f in car.slab_fares
        if f.slab is not None
    )
    return VehicleQuote(car_id=car.id, name=car.regular_name, slabs=slabs)
