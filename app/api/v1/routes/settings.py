from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import require_roles
from app.core.errors import NotFoundError
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import ok
from app.schemas.common_setting import CommonSettingIn, CommonSettingOut, CommonSettingPatch
from app.services import settings_service

router = APIRouter(tags=["settings"])


def _out(s) -> dict:
    return CommonSettingOut.model_validate(s).model_dump(mode="json")


@router.get("/settings")
def get_settings(db: Session = Depends(get_db)):
    s = settings_service.get_common_setting(db)
    if s is None:
        raise NotFoundError("Common settings not found.")
    return ok(_out(s), "Common settings retrieved successfully.")


@router.post("/settings", status_code=201)
def create_settings(body: CommonSettingIn, db: Session = Depends(get_db),
                    me: User = Depends(require_roles("admin"))):
    return ok(_out(settings_service.create_common_setting(db, body)), "Common settings created successfully.")


@router.put("/settings")
def update_settings(body: CommonSettingPatch, db: Session = Depends(get_db),
                    me: User = Depends(require_roles("admin"))):
    return ok(_out(settings_service.update_common_setting(db, body)), "Common settings updated successfully.")
