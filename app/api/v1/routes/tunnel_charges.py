from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import require_roles
from app.db.session import get_db
from app.models.tunnel_charge import TunnelCharge
from app.models.user import User
from app.schemas.common import ok
from app.schemas.tunnel_charge import TunnelChargeIn, TunnelChargeOut, TunnelChargePatch
from app.services import tunnel_charge_service
from app.services.crud import get_or_404, list_all

router = APIRouter(tags=["tunnel-charges"])


def _out(t: TunnelCharge) -> dict:
    return TunnelChargeOut.model_validate(t).model_dump(mode="json")


@router.get("/tunnel-charges")
def list_tunnel_charges(db: Session = Depends(get_db)):
    return ok([_out(t) for t in list_all(db, TunnelCharge)], "Tunnel charges retrieved successfully.")


@router.get("/tunnel-charges/{charge_id}")
def get_tunnel_charge(charge_id: int, db: Session = Depends(get_db)):
    return ok(_out(get_or_404(db, TunnelCharge, charge_id, "Tunnel charge")), "Tunnel charge retrieved successfully.")


@router.post("/tunnel-charges", status_code=201)
def create_tunnel_charge(body: TunnelChargeIn, db: Session = Depends(get_db),
                         me: User = Depends(require_roles("admin"))):
    return ok(_out(tunnel_charge_service.create_tunnel_charge(db, body)), "Tunnel charge created successfully.")


@router.put("/tunnel-charges/{charge_id}")
def update_tunnel_charge(charge_id: int, body: TunnelChargePatch, db: Session = Depends(get_db),
                         me: User = Depends(require_roles("admin"))):
    t = tunnel_charge_service.update_tunnel_charge(db, charge_id, body)
    return ok(_out(t), "Tunnel charge updated successfully.")


@router.delete("/tunnel-charges/{charge_id}")
def delete_tunnel_charge(charge_id: int, db: Session = Depends(get_db),
                         me: User = Depends(require_roles("admin"))):
    tunnel_charge_service.delete_tunnel_charge(db, charge_id)
    return ok(None, "Tunnel charge deleted successfully.")
