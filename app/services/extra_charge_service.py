from sqlalchemy import String, func, literal, or_
from sqlalchemy.orm import Session

from app.models.extra_charge import ExtraCharge
from app.schemas.extra_charge import ExtraChargeIn, ExtraChargePatch
from app.services.crud import apply_patch, get_or_404
from app.services.fare_calculator import AreaCharge


def create_extra_charge(db: Session, body: ExtraChargeIn) -> ExtraCharge:
    e = ExtraCharge(**body.model_dump())
    db.add(e)
    db.commit()
    db.refresh(e)
    return e


def update_extra_charge(db: Session, charge_id: int, body: ExtraChargePatch) -> ExtraCharge:
    e = get_or_404(db, ExtraCharge, charge_id, "Extra charge")
    apply_patch(e, body)
    db.commit()
    db.refresh(e)
    return e


def delete_extra_charge(db: Session, charge_id: int) -> None:
    e = get_or_404(db, ExtraCharge, charge_id, "Extra charge")
    db.delete(e)
    db.commit()


def _like_escaped(column):
    """Column value as a literal LIKE operand: backslash, % and _ lose their wildcard meaning."""
    escaped = func.replace(column, "\\", "\\\\")
    escaped = func.replace(escaped, "%", "\\%")
    return func.replace(escaped, "_", "\\_", type_=String)


def find_area_charge(db: Session, location: str) -> AreaCharge | None:
    """First active area whose name overlaps the location text, in either direction."""
    location = (location or "").strip()
    if not location:
        return None
    row = (
        db.query(ExtraCharge)
        .filter(ExtraCharge.status == 1)
        .filter(
            or_(
                ExtraCharge.area_name.icontains(location, autoescape=True),
                literal(location).ilike("%" + _like_escaped(ExtraCharge.area_name) + "%", escape="\\"),
            )
        )
        .order_by(ExtraCharge.id.asc())
        .first()
    )
    if row is None:
        return None
    return AreaCharge(
        area_name=row.area_name,
        extra_charge=float(row.extra_charge or 0),
        extra_toll_charge=float(row.extra_toll_charge or 0),
    )
