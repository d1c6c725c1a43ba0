from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import require_roles
from app.db.session import get_db
from app.models.extra_charge import ExtraCharge
from app.models.user import User
from app.schemas.common import ok
from app.schemas.extra_charge import ExtraChargeIn, ExtraChargeOut, ExtraChargePatch
from app.services import extra_charge_service
from app.services.crud import get_or_404, list_all

router = APIRouter(tags=["extra-charges"])


def _out(e: ExtraCharge) -> dict:
    return ExtraChargeOut.model_validate(e).model_dump(mode="json")


@router.get("/extra-charges")
def list_extra_charges(db: Session = Depends(get_db)):
    return ok([_out(e) for e in list_all(db, ExtraCharge)], "Extra charges retrieved successfully.")


@router.get("/extra-charges/{charge_id}")
def get_extra_charge(charge_id: int, db: Session = Depends(get_db)):
    return ok(_out(get_or_404(db, ExtraCharge, charge_id, "Extra charge")), "Extra charge retrieved successfully.")


@router.post("/extra-charges", status_code=201)
def create_extra_charge(body: ExtraChargeIn, db: Session = Depends(get_db),
                        me: User = Depends(require_roles("admin"))):
    return ok(_out(extra_charge_service.create_extra_charge(db, body)), "Extra charge created successfully.")


@router.put("/extra-charges/{charge_id}")
def update_extra_charge(charge_id: int, body: ExtraChargePatch, db: Session = Depends(get_db),
                        me: User = Depends(require_roles("admin"))):
    e = extra_charge_service.update_extra_charge(db, charge_id, body)
    return ok(_out(e), "Extra charge updated successfully.")


@router.delete("/extra-charges/{charge_id}")
def delete_extra_charge(charge_id: int, db: Session = Depends(get_db),
                        me: User = Depends(require_roles("admin"))):
    extra_charge_service.delete_extra_charge(db, charge_id)
    return ok(None, "Extra charge deleted successfully.")
