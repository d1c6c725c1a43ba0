from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import require_roles
from app.db.session import get_db
from app.models.sms_service import SmsService
from app.models.user import User
from app.schemas.common import ok
from app.schemas.sms_service import SmsServiceIn, SmsServiceOut, SmsServicePatch
from app.services import sms_service_service
from app.services.crud import get_or_404, list_all

router = APIRouter(tags=["sms-services"])


def _out(s: SmsService) -> dict:
    return SmsServiceOut.model_validate(s).model_dump(mode="json")


@router.get("/sms-services")
def list_sms_services(db: Session = Depends(get_db)):
    return ok([_out(s) for s in list_all(db, SmsService)], "SMS services retrieved successfully.")


@router.get("/sms-services/{sms_id}")
def get_sms_service(sms_id: int, db: Session = Depends(get_db)):
    return ok(_out(get_or_404(db, SmsService, sms_id, "SMS service")), "SMS service retrieved successfully.")


@router.post("/sms-services", status_code=201)
def create_sms_service(body: SmsServiceIn, db: Session = Depends(get_db),
                       me: User = Depends(require_roles("admin"))):
    return ok(_out(sms_service_service.create_sms_service(db, body)), "SMS service created successfully.")


@router.put("/sms-services/{sms_id}")
def update_sms_service(sms_id: int, body: SmsServicePatch, db: Session = Depends(get_db),
                       me: User = Depends(require_roles("admin"))):
    return ok(_out(sms_service_service.update_sms_service(db, sms_id, body)), "SMS service updated successfully.")


@router.delete("/sms-services/{sms_id}")
def delete_sms_service(sms_id: int, db: Session = Depends(get_db),
                       me: User = Depends(require_roles("admin"))):
    sms_service_service.delete_sms_service(db, sms_id)
    return ok(None, "SMS service deleted successfully.")
