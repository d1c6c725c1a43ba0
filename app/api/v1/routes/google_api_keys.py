from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import require_roles
from app.core.errors import NotFoundError
from app.db.session import get_db
from app.models.google_api_key import GoogleApiKey
from app.models.user import User
from app.schemas.common import ok
from app.schemas.google_api_key import GoogleApiKeyIn, GoogleApiKeyOut, GoogleApiKeyPatch
from app.services import google_api_key_service
from app.services.crud import get_or_404, list_all

router = APIRouter(tags=["google-api-keys"])


def _out(k: GoogleApiKey) -> dict:
    return GoogleApiKeyOut.model_validate(k).model_dump(mode="json")


@router.get("/google-api-keys")
def list_api_keys(db: Session = Depends(get_db)):
    return ok([_out(k) for k in list_all(db, GoogleApiKey)], "Google API keys retrieved successfully.")


# Declared before /{key_id} so "active" is not parsed as an id.
@router.get("/google-api-keys/active/single")
def get_active_api_key(db: Session = Depends(get_db)):
    k = google_api_key_service.get_latest_active_key(db)
    if k is None:
        raise NotFoundError("No active Google API key found.")
    return ok(_out(k), "Active Google API key retrieved successfully.")


@router.get("/google-api-keys/{key_id}")
def get_api_key(key_id: int, db: Session = Depends(get_db)):
    return ok(_out(get_or_404(db, GoogleApiKey, key_id, "Google API key")), "Google API key retrieved successfully.")


@router.post("/google-api-keys", status_code=201)
def create_api_key(body: GoogleApiKeyIn, db: Session = Depends(get_db),
                   me: User = Depends(require_roles("admin"))):
    return ok(_out(google_api_key_service.create_api_key(db, body)), "Google API key created successfully.")


@router.put("/google-api-keys/{key_id}")
def update_api_key(key_id: int, body: GoogleApiKeyPatch, db: Session = Depends(get_db),
                   me: User = Depends(require_roles("admin"))):
    return ok(_out(google_api_key_service.update_api_key(db, key_id, body)), "Google API key updated successfully.")


@router.delete("/google-api-keys/{key_id}")
def delete_api_key(key_id: int, db: Session = Depends(get_db),
                   me: User = Depends(require_roles("admin"))):
    google_api_key_service.delete_api_key(db, key_id)
    return ok(None, "Google API key deleted successfully.")
