from sqlalchemy.orm import Session

from app.models.slab import Slab
from app.schemas.slab import SlabIn, SlabPatch
from app.services.crud import apply_patch, get_or_404


def create_slab(db: Session, body: SlabIn) -> Slab:
    s = Slab(**body.model_dump())
    db.add(s)
    db.commit()
    db.refresh(s)
    return s


def update_slab(db: Session, slab_id: int, body: SlabPatch) -> Slab:
    s = get_or_404(db, Slab, slab_id, "Slab")
    apply_patch(s, body)
    db.commit()
    db.refresh(s)
    return s


def delete_slab(db: Session, slab_id: int) -> None:
    s = get_or_404(db, Slab, slab_id, "Slab")
    db.delete(s)
    db.commit()
