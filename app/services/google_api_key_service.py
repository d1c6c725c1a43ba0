from sqlalchemy.orm import Session

from app.core.errors import DuplicateEntryError
from app.models.google_api_key import GoogleApiKey
from app.schemas.google_api_key import GoogleApiKeyIn, GoogleApiKeyPatch
from app.services.crud import apply_patch, get_or_404


def get_latest_active_key(db: Session) -> GoogleApiKey | None:
    return (
        db.query(GoogleApiKey)
        .filter(GoogleApiKey.status == 1)
        .order_by(GoogleApiKey.id.desc())
        .first()
    )


def _ensure_unique_key(db: Session, api_key: str, exclude_id: int | None = None) -> None:
    q = db.query(GoogleApiKey).filter(GoogleApiKey.api_key == api_key)
    if exclude_id is not None:
        q = q.filter(GoogleApiKey.id != exclude_id)
    if q.first():
        raise DuplicateEntryError("This Google API key already exists.")


def create_api_key(db: Session, body: GoogleApiKeyIn) -> GoogleApiKey:
    _ensure_unique_key(db, body.api_key)
    k = GoogleApiKey(**body.model_dump())
    db.add(k)
    db.commit()
    db.refresh(k)
    return k


def update_api_key(db: Session, key_id: int, body: GoogleApiKeyPatch) -> GoogleApiKey:
    k = get_or_404(db, GoogleApiKey, key_id, "Google API key")
    if body.api_key is not None and body.api_key != k.api_key:
        _ensure_unique_key(db, body.api_key, exclude_id=k.id)
    apply_patch(k, body)
    db.commit()
    db.refresh(k)
    return k


def delete_api_key(db: Session, key_id: int) -> None:
    k = get_or_404(db, GoogleApiKey, key_id, "Google API key")
    db.delete(k)
    db.commit()
