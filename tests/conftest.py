import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.api.deps import get_distance_provider
from app.core.security import create_access_token, hash_password
from app.db.session import Base, get_db
from app.models.airport import Airport
from app.models.car import Car, CarSlabFare
from app.models.common_setting import CommonSetting
from app.models.slab import Slab
from app.models.user import User
from app.services.fare_calculator import RouteMetrics


class FakeDistanceProvider:
    """Stands in for GoogleMapsService; records every lookup."""

    def __init__(self, distance=12.0, duration="0 Hours 25 Minutes", error=None):
        self.route = RouteMetrics(distance=distance, duration=duration)
        self.error = error
        self.calls = []

    def get_distance_matrix(self, origin, destination):
        self.calls.append((origin, destination))
        if self.error is not None:
            raise self.error
        return self.route

    def suggest_places(self, text, session_token="", language="en", types=""):
        return [{"place_id": "abc", "description": f"{text}, Boston, MA, USA", "matched_substrings": [], "terms": []}]


@pytest.fixture
def engine():
    eng = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def distance_provider():
    return FakeDistanceProvider()


@pytest.fixture
def client(db, distance_provider):
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_distance_provider] = lambda: distance_provider
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(db):
    u = User(email="admin@example.com", full_name="Admin", role="admin",
             password_hash=hash_password("admin2025"), is_active=True)
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


@pytest.fixture
def admin_headers(admin_user):
    return {"Authorization": f"Bearer {create_access_token(admin_user.id, admin_user.role)}"}


@pytest.fixture
def make_car(db):
    """Car with distance slabs [6@5, 9@4, 100@3.5] unless rates are given."""

    def _make(name="Sedan", passengers=4, small=1, large=2, child_seat=False, status=1,
              rates=((6, 5.0), (9, 4.0), (100, 3.5))):
        car = Car(regular_name=name, short_name=name, num_of_passengers=passengers,
                  small_luggage_capacity=small, large_luggage_capacity=large,
                  is_child_seat=child_seat, status=status)
        db.add(car)
        db.flush()
        for upper, rate in rates:
            slab = Slab(slab_value=upper, slab_unit=0, slab_type=0, status=1)
            db.add(slab)
            db.flush()
            db.add(CarSlabFare(car_id=car.id, slab_id=slab.id, fare_amount=rate, status=1))
        db.commit()
        db.refresh(car)
        return car

    return _make


@pytest.fixture
def common_settings(db):
    s = CommonSetting(company_name="Boston Airport Taxi", address="Boston, MA",
                      telephone_number="6172306362", email="info@example.com",
                      gratuity=10.0, tunnel_charge=3.0, night_charge=0.0, status=1)
    db.add(s)
    db.commit()
    db.refresh(s)
    return s


@pytest.fixture
def airport(db):
    a = Airport(name="Logan Airport Boston, Ma 02128", description="Logan", from_tax_toll=7.5, to_tax_toll=12.0, status=1)
    db.add(a)
    db.commit()
    db.refresh(a)
    return a


@pytest.fixture
def provider_factory():
    return FakeDistanceProvider
