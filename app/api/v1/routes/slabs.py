from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import require_roles
from app.db.session import get_db
from app.models.slab import Slab
from app.models.user import User
from app.schemas.common import ok
from app.schemas.slab import SlabIn, SlabOut, SlabPatch
from app.services import slab_service
from app.services.crud import get_or_404, list_all

router = APIRouter(tags=["slabs"])


def _out(s: Slab) -> dict:
    return SlabOut.model_validate(s).model_dump(mode="json")


@router.get("/slabs")
def list_slabs(db: Session = Depends(get_db)):
    return ok([_out(s) for s in list_all(db, Slab)], "Slabs retrieved successfully.")


@router.get("/slabs/{slab_id}")
def get_slab(slab_id: int, db: Session = Depends(get_db)):
    return ok(_out(get_or_404(db, Slab, slab_id, "Slab")), "Slab retrieved successfully.")


@router.post("/slabs", status_code=201)
def create_slab(body: SlabIn, db: Session = Depends(get_db),
                me: User = Depends(require_roles("admin"))):
    return ok(_out(slab_service.create_slab(db, body)), "Slab created successfully.")


@router.put("/slabs/{slab_id}")
def update_slab(slab_id: int, body: SlabPatch, db: Session = Depends(get_db),
                me: User = Depends(require_roles("admin"))):
    return ok(_out(slab_service.update_slab(db, slab_id, body)), "Slab updated successfully.")


@router.delete("/slabs/{slab_id}")
def delete_slab(slab_id: int, db: Session = Depends(get_db),
                me: User = Depends(require_roles("admin"))):
    slab_service.delete_slab(db, slab_id)
    return ok(None, "Slab deleted successfully.")
