from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import require_roles
from app.db.session import get_db
from app.models.airport import Airport
from app.models.user import User
from app.schemas.airport import AirportIn, AirportOut, AirportPatch
from app.schemas.common import ok
from app.services import airport_service
from app.services.crud import get_or_404, list_all

router = APIRouter(tags=["airports"])


def _out(a: Airport) -> dict:
    return AirportOut.model_validate(a).model_dump(mode="json")


@router.get("/airports")
def list_airports(db: Session = Depends(get_db)):
    return ok([_out(a) for a in list_all(db, Airport)], "Airports retrieved successfully.")


@router.get("/airports/active")
def list_active_airports(db: Session = Depends(get_db)):
    return ok([_out(a) for a in list_all(db, Airport, active_only=True)], "Active airports retrieved successfully.")


@router.get("/airports/{airport_id}")
def get_airport(airport_id: int, db: Session = Depends(get_db)):
    return ok(_out(get_or_404(db, Airport, airport_id, "Airport")), "Airport retrieved successfully.")


@router.post("/airports", status_code=201)
def create_airport(body: AirportIn, db: Session = Depends(get_db),
                   me: User = Depends(require_roles("admin"))):
    return ok(_out(airport_service.create_airport(db, body)), "Airport created successfully.")


@router.put("/airports/{airport_id}")
def update_airport(airport_id: int, body: AirportPatch, db: Session = Depends(get_db),
                   me: User = Depends(require_roles("admin"))):
    return ok(_out(airport_service.update_airport(db, airport_id, body)), "Airport updated successfully.")


@router.delete("/airports/{airport_id}")
def delete_airport(airport_id: int, db: Session = Depends(get_db),
                   me: User = Depends(require_roles("admin"))):
    airport_service.delete_airport(db, airport_id)
    return ok(None, "Airport deleted successfully.")
