from sqlalchemy.orm import Session

from app.models.sms_service import SmsService
from app.schemas.sms_service import SmsServiceIn, SmsServicePatch
from app.services.crud import apply_patch, get_or_404


def create_sms_service(db: Session, body: SmsServiceIn) -> SmsService:
    s = SmsService(**body.model_dump())
    db.add(s)
    db.commit()
    db.refresh(s)
    return s


def update_sms_service(db: Session, sms_id: int, body: SmsServicePatch) -> SmsService:
    s = get_or_404(db, SmsService, sms_id, "SMS service")
    apply_patch(s, body)
    db.commit()
    db.refresh(s)
    return s


def delete_sms_service(db: Session, sms_id: int) -> None:
    s = get_or_404(db, SmsService, sms_id, "SMS service")
    db.delete(s)
    db.commit()
