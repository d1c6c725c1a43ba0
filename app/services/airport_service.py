from sqlalchemy.orm import Session

from app.core.errors import DuplicateEntryError, NotFoundError
from app.models.airport import Airport
from app.schemas.airport import AirportIn, AirportPatch
from app.services.crud import apply_patch, get_or_404
from app.services.fare_calculator import AirportToll


def _ensure_unique_name(db: Session, name: str, exclude_id: int | None = None) -> None:
    q = db.query(Airport).filter(Airport.name == name)
    if exclude_id is not None:
        q = q.filter(Airport.id != exclude_id)
    if q.first():
        raise DuplicateEntryError(f"Airport with name '{name}' already exists.")


def create_airport(db: Session, body: AirportIn) -> Airport:
    _ensure_unique_name(db, body.name)
    a = Airport(**body.model_dump())
    db.add(a)
    db.commit()
    db.refresh(a)
    return a


def update_airport(db: Session, airport_id: int, body: AirportPatch) -> Airport:
    a = get_or_404(db, Airport, airport_id, "Airport")
    if body.name is not None and body.name != a.name:
        _ensure_unique_name(db, body.name, exclude_id=a.id)
    apply_patch(a, body)
    db.commit()
    db.refresh(a)
    return a


def delete_airport(db: Session, airport_id: int) -> None:
    a = get_or_404(db, Airport, airport_id, "Airport")
    db.delete(a)
    db.commit()


def get_airport_toll(db: Session, airport_id: int) -> AirportToll:
    a = db.get(Airport, airport_id)
    if a is None:
        raise NotFoundError(f"Airport with ID {airport_id} not found.")
    return AirportToll(
        airport_id=a.id,
        name=a.name,
        from_tax_toll=float(a.from_tax_toll or 0),
        to_tax_toll=float(a.to_tax_toll or 0),
    )
