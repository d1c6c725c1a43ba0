from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError


def get_or_404(db: Session, model, obj_id: int, label: str):
    obj = db.get(model, obj_id)
    if obj is None:
        raise NotFoundError(f"{label} with ID {obj_id} not found.")
    return obj


def apply_patch(obj, patch: BaseModel) -> None:
    """Copy only the fields the client actually sent."""
    for key, value in patch.model_dump(exclude_unset=True).items():
        setattr(obj, key, value)


def list_all(db: Session, model, active_only: bool = False):
    q = db.query(model)
    if active_only:
        q = q.filter(model.status == 1)
    return q.order_by(model.id.asc()).all()
