from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.schemas.auth import LoginRequest, RefreshRequest, TokenPair
from app.schemas.common import ok
from app.models.user import User
from app.core.errors import AuthenticationError
from app.core.security import verify_password, create_access_token, create_refresh_token, decode_token, REFRESH
from app.api.deps import get_current_user

router = APIRouter(tags=["auth"])


def _token_pair(user: User) -> dict:
    return TokenPair(
        access_token=create_access_token(user.id, user.role),
        refresh_token=create_refresh_token(user.id, user.role),
    ).model_dump()


@router.post("/auth/login")
def login(body: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == body.email.strip().lower()).first()
    if not user or not user.is_active or not verify_password(body.password, user.password_hash):
        raise AuthenticationError("Invalid credentials.")
    return ok(_token_pair(user), "Login successful.")


@router.post("/auth/refresh")
def refresh(body: RefreshRequest, db: Session = Depends(get_db)):
    user_id = decode_token(body.refresh_token, expected_type=REFRESH)
    user = db.get(User, user_id)
    if not user or not user.is_active:
        raise AuthenticationError("User not found or inactive.")
    return ok(_token_pair(user), "Token refreshed.")


@router.get("/auth/me")
def me(me: User = Depends(get_current_user)):
    """Return current user info including role."""
    return ok(
        {"id": me.id, "email": me.email, "full_name": me.full_name or "", "role": me.role},
        "Current user retrieved.",
    )
