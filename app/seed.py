import json

from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import OperationalError, ProgrammingError

from app.db.session import SessionLocal
from app.core.config import settings
from app.core.security import hash_password
from app.models.user import User
from app.models.airport import Airport
from app.models.slab import Slab
from app.models.car import Car, CarSlabFare
from app.models.sms_service import SmsService
from app.models.common_setting import CommonSetting

AIRPORTS = [
    ("Logan Airport Boston, Ma 02128", "Logan International Airport, Boston, MA", 7.50, 12.00, 1),
    ("Hazrat Shahjalal International Airport", "Main international airport in Bangladesh.", 5.50, 6.00, 1),
    ("Cox's Bazar Airport", "Domestic airport serving Cox's Bazar.", 2.00, 2.50, 0),
    ("Sylhet Osmani International Airport", "International airport serving Sylhet.", 4.00, 4.50, 0),
]

# (slab_value, slab_unit, slab_type): six mileage brackets then six hourly ones
SLABS = [
    (6.00, 0, 0), (9.00, 0, 0), (11.00, 0, 0), (19.00, 0, 0), (25.00, 0, 0), (100.00, 0, 0),
    (2.00, 1, 1), (5.00, 1, 1), (10.00, 1, 1), (15.00, 1, 1), (20.00, 1, 1), (24.00, 1, 1),
]

_FEATURES_LUX = (
    "<p>mirrored ceilings and stereo, to DVD players, full champagne bars and video game consuls, "
    "eight flat screen televisions, chrome wheels and lava lamps.</p>"
)

# regular_name, short_name, color, photo, features, base, minimum, small, large, extra, passengers, child_seat
CARS = [
    ("2 Passenger Luxury Minivan", "2pv Luxury Vehicle", "Silver", "1-4961.webp",
     "Modified sedans with leather upholstery for a comfortable airport ride.", 25.00, 60.00, 1, 2, 8, 2, True),
    ("3 Passenger Luxury Vehicle", "3pv Luxury Vehicle", "White", "2-7274.webp",
     "Spacious luxury van with integrated audio and video panels.", 30.00, 90.00, 1, 3, 7, 3, True),
    ("4 Passenger Luxury Vehicle", "4pv Luxury Vehicle", "Black", "5-8767.webp",
     "Air Conditioning, GPS, Bluetooth", 35.00, 99.00, 1, 4, 6, 4, True),
    ("5 Passenger Luxury Vehicle", "5pv Luxury Vehicle", "White", "7-5994.webp", _FEATURES_LUX, 40.00, 110.00, 1, 5, 1, 5, True),
    ("6 Passenger Luxury Vehicle", "6pv Luxury Vehicle", "White", "21-9230.jpg", _FEATURES_LUX, 45.00, 120.00, 1, 6, 0, 6, True),
    ("7 Passenger Luxury Vehicle", "7pv Luxury Vehicle", "White", "23-1399.webp", _FEATURES_LUX, 50.00, 130.00, 0, 5, 0, 7, False),
]

# Per car, in SLABS order: six per-mile rates then six hourly rates
CAR_RATES = [
    [5.00, 4.00, 4.00, 4.00, 3.50, 3.50] + [50.00] * 6,
    [5.00, 5.00, 4.00, 3.50, 3.50, 3.50] + [50.00] * 6,
    [5.00, 5.00, 4.50, 4.00, 3.50, 3.50] + [60.00] * 6,
    [5.00, 5.00, 5.00, 4.00, 3.75, 3.50] + [70.00] * 6,
    [5.50, 5.00, 5.00, 4.50, 4.00, 4.00] + [75.00] * 6,
    [6.00, 5.50, 5.00, 5.00, 4.50, 4.00] + [70.00] * 6,
]

SMS_NUMBERS = ["+6172306362", "+8577772125"]

DEFAULT_SETTINGS = dict(
    company_name="Boston Airport Taxi",
    address="Boston, MA",
    telephone_number="6172306362",
    booking_call_number="8577772125",
    email="info@example.com",
    holidays=json.dumps(["2025-12-25", "2026-01-01"]),
    holiday_surcharge=10.00,
    tunnel_charge=3.00,
    gratuity=10.00,
    stop_over_charge=10.00,
    infant_front_facing_seat_charge=10.00,
    infant_rear_facing_seat_charge=10.00,
    infant_booster_seat_charge=5.00,
    night_charge=5.00,
    night_charge_start_time="22:00",
    night_charge_end_time="06:00",
    hidden_night_charge=0.00,
    credit_card_charge=0.00,
    status=1,
)


def ensure_user(db: Session, email: str, password: str, role: str, name: str):
    u = db.query(User).filter(User.email == email).first()
    if u:
        return
    db.add(
        User(
            email=email,
            full_name=name,
            role=role,
            password_hash=hash_password(password),
            is_active=True,
        )
    )
    db.commit()


def _is_empty(db: Session, model) -> bool:
    return db.query(model.id).first() is None


def seed_airports(db: Session):
    if not _is_empty(db, Airport):
        print("[seed] airports not empty, skipping")
        return
    for name, desc, from_toll, to_toll, status in AIRPORTS:
        db.add(Airport(name=name, description=desc, from_tax_toll=from_toll, to_tax_toll=to_toll, status=status))
    db.commit()
    print(f"[seed] airports: {len(AIRPORTS)}")


def seed_cars_and_slabs(db: Session):
    if not _is_empty(db, Slab) or not _is_empty(db, Car):
        print("[seed] slabs/cars not empty, skipping")
        return
    slabs = [Slab(slab_value=v, slab_unit=u, slab_type=t, status=1) for v, u, t in SLABS]
    db.add_all(slabs)
    db.flush()
    for row, rates in zip(CARS, CAR_RATES):
        name, short, color, photo, features, base, minimum, small, large, extra, pax, child_seat = row
        car = Car(
            regular_name=name, short_name=short, color=color, car_photo=photo, car_features=features,
            base_fare=base, minimum_fare=minimum,
            small_luggage_capacity=small, large_luggage_capacity=large, extra_luggage_capacity=extra,
            num_of_passengers=pax, is_child_seat=child_seat, status=1,
        )
        car.slab_fares = [CarSlabFare(slab_id=s.id, fare_amount=r, status=1) for s, r in zip(slabs, rates)]
        db.add(car)
    db.commit()
    print(f"[seed] slabs: {len(SLABS)}, cars: {len(CARS)}")


def seed_sms(db: Session):
    if not _is_empty(db, SmsService):
        return
    db.add_all([SmsService(phone_number=n, status=1) for n in SMS_NUMBERS])
    db.commit()
    print(f"[seed] sms numbers: {len(SMS_NUMBERS)}")


def seed_settings(db: Session):
    if not _is_empty(db, CommonSetting):
        return
    db.add(CommonSetting(**DEFAULT_SETTINGS))
    db.commit()
    print("[seed] common settings row created")


def run(db=None):
    if db is None:
        db = SessionLocal()
    try:
        # If migrations haven't been applied yet, seeding must not crash the API.
        try:
            db.execute(text("SELECT 1 FROM users LIMIT 1"))
        except (ProgrammingError, OperationalError):
            db.rollback()
            print("[seed] users table not found yet. Skipping seeding (run alembic upgrade head).")
            return

        ensure_user(db, settings.SEED_ADMIN_EMAIL.lower(), settings.SEED_ADMIN_PASSWORD, "admin", "Admin User")
        seed_airports(db)
        seed_cars_and_slabs(db)
        seed_sms(db)
        seed_settings(db)
        print("[seed] done")
    finally:
        db.close()


if __name__ == "__main__":
    run()
