from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.errors import AuthenticationError
from app.core.security import decode_token
from app.models.user import User
from app.services.google_maps_service import GoogleMapsService

bearer = HTTPBearer(auto_error=False)

def get_current_user(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
    db: Session = Depends(get_db),
) -> User:
    if not creds:
        raise AuthenticationError("Not authenticated.")
    user_id = decode_token(creds.credentials)
    user = db.get(User, user_id)
    if not user or not user.is_active:
        raise AuthenticationError("User not found or inactive.")
    return user

def require_roles(*roles: str):
    def _guard(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles:
            raise HTTPException(status_code=403, detail="Forbidden")
        return user
    return _guard

def get_distance_provider(db: Session = Depends(get_db)) -> GoogleMapsService:
    return GoogleMapsService(db)
