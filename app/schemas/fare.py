from datetime import date, datetime
from pydantic import BaseModel, Field
from typing import Literal, Optional

from app.core.errors import ValidationError
from app.services.fare_calculator import (
    FareRequest,
    PICKUP_TIME_FORMAT,
    SERVICE_DOOR_TO_DOOR,
    SERVICE_TYPES,
    SERVICE_FROM_AIRPORT,
    SERVICE_TO_AIRPORT,
)

AIRPORT_SERVICES = (SERVICE_FROM_AIRPORT, SERVICE_TO_AIRPORT)


class FareCalculationIn(BaseModel):
    service_type: Literal[SERVICE_TYPES]
    pickup_location: Optional[str] = None
    dropoff_location: Optional[str] = None
    airport_id: Optional[int] = Field(None, ge=1)
    pickup_date: date
    pickup_time: str
    adults: int = Field(ge=1)
    children: int = Field(0, ge=0)
    luggage: int = Field(0, ge=0)
    child_seats: Optional[int] = Field(None, ge=0)
    front_infant_seats: int = Field(0, ge=0)
    rear_infant_seats: int = Field(0, ge=0)
    booster_seats: int = Field(0, ge=0)
    stop_overs: int = Field(0, ge=0)
    front_price: float = Field(0.0, ge=0)
    rear_price: float = Field(0.0, ge=0)
    booster_price: float = Field(0.0, ge=0)
    stopover_price: float = Field(0.0, ge=0)

    def check(self) -> None:
        """Cross-field rules; raises ValidationError with every failing field."""
        errors: dict[str, list[str]] = {}

        def add(field, message):
            errors.setdefault(field, []).append(message)

        try:
            datetime.strptime(self.pickup_time.strip().upper(), PICKUP_TIME_FORMAT)
        except ValueError:
            add("pickup_time", "Pickup time must be in hh:mm AM/PM format.")

        if self.service_type in AIRPORT_SERVICES and self.airport_id is None:
            add("airport_id", "Airport selection is required for this service.")
        if self.service_type in (SERVICE_FROM_AIRPORT, SERVICE_DOOR_TO_DOOR) and not (self.dropoff_location or "").strip():
            add("dropoff_location", "Drop-off location is required for this service.")
        if self.service_type in (SERVICE_TO_AIRPORT, SERVICE_DOOR_TO_DOOR) and not (self.pickup_location or "").strip():
            add("pickup_location", "Pickup location is required for this service.")

        if self.children > 0:
            seats = self.front_infant_seats + self.rear_infant_seats + self.booster_seats
            if not self.child_seats:
                add("child_seats", "Child seats are required when children are selected.")
            elif seats <= 0:
                add(
                    "seat_types",
                    "At least one type of child seat (front infant, rear infant, or booster) "
                    "must be selected when children are traveling.",
                )
            elif seats != self.child_seats:
                add("child_seats", "Sum of selected seat types must equal the child_seats value.")

        if errors:
            raise ValidationError(errors=errors)

    def to_request(self) -> FareRequest:
        self.check()
        return FareRequest(
            service_type=self.service_type,
            pickup_location=(self.pickup_location or "").strip(),
            dropoff_location=(self.dropoff_location or "").strip(),
            pickup_date=self.pickup_date,
            pickup_time=self.pickup_time.strip().upper(),
            adults=self.adults,
            children=self.children,
            luggage=self.luggage,
            front_infant_seats=self.front_infant_seats,
            rear_infant_seats=self.rear_infant_seats,
            booster_seats=self.booster_seats,
            stop_overs=self.stop_overs,
            airport_id=self.airport_id,
            front_price=self.front_price,
            rear_price=self.rear_price,
            booster_price=self.booster_price,
            stopover_price=self.stopover_price,
        )
