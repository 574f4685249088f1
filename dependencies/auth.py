from typing import Optional
from datetime import datetime, timedelta, timezone
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from pydantic import BaseModel

from core.config import settings


bearer_scheme = HTTPBearer()


# ============================================================
# Current User Model
# ============================================================
class CurrentUser(BaseModel):
    id: str
    role: str

    username: Optional[str] = None
    email: Optional[str] = None
    organization_id: Optional[int] = None


# ============================================================
# TOKEN ENCODING (used by the login flow and by tests)
# ============================================================
def create_access_token(
    user_id: str,
    role: str,
    expires_minutes: int = 60,
    **claims,
) -> str:
    payload = {
        "sub": str(user_id),
        "role": str(role),
        "exp": datetime.now(timezone.utc) + timedelta(minutes=expires_minutes),
        **claims,
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


# ============================================================
# AUTH DECODING
# ============================================================
def decode_access_token(token: str) -> CurrentUser:
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired authentication token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except JWTError:
        raise unauthorized

    user_id = payload.get("sub")
    role = payload.get("role")

    # Unknown roles are kept as-is; the permission table denies them.
    if not user_id or not role:
        raise unauthorized

    return CurrentUser(
        id=str(user_id),
        role=str(role),
        username=payload.get("username"),
        email=payload.get("email"),
        organization_id=payload.get("organization_id"),
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> CurrentUser:
    return decode_access_token(credentials.credentials)


# ============================================================
# OPTIONAL AUTHENTICATION (for hybrid endpoints)
# ============================================================
def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(HTTPBearer(auto_error=False)),
) -> Optional[CurrentUser]:
    """
    Returns CurrentUser if a valid token was provided, None otherwise.
    """
    if not credentials:
        return None

    try:
        return decode_access_token(credentials.credentials)
    except HTTPException:
        return None
