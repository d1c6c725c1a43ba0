from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.models.tunnel_charge import TunnelCharge
from app.schemas.tunnel_charge import TunnelChargeIn, TunnelChargePatch
from app.services.crud import apply_patch, get_or_404


def create_tunnel_charge(db: Session, body: TunnelChargeIn) -> TunnelCharge:
    t = TunnelCharge(**body.model_dump())
    db.add(t)
    db.commit()
    db.refresh(t)
    return t


def update_tunnel_charge(db: Session, charge_id: int, body: TunnelChargePatch) -> TunnelCharge:
    t = get_or_404(db, TunnelCharge, charge_id, "Tunnel charge")
    start = body.charge_start_date or t.charge_start_date
    end = body.charge_end_date or t.charge_end_date
    if end < start:
        raise ValidationError(errors={"charge_end_date": ["Charge end date must be on or after the start date."]})
    apply_patch(t, body)
    db.commit()
    db.refresh(t)
    return t


def delete_tunnel_charge(db: Session, charge_id: int) -> None:
    t = get_or_404(db, TunnelCharge, charge_id, "Tunnel charge")
    db.delete(t)
    db.commit()
