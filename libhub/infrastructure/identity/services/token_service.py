"""Access token creation and verification."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError
from pydantic import BaseModel

from libhub.config import get_settings

settings = get_settings()
SECRET_KEY = settings.SECRET_KEY
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES


class AccessToken(BaseModel):
    """OAuth2 bearer token response."""

    access_token: str
    token_type: str
    expires_in: int


class TokenClaims(BaseModel):
    user_id: int
    role: str


def create_access_token(user_id: int, role: str) -> AccessToken:
    """Create a signed access token carrying the user's id and role."""
    expire = datetime.now(UTC) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"sub": str(user_id), "role": role, "exp": expire, "type": "access"}
    return AccessToken(
        access_token=jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM),
        token_type="bearer",  # noqa: S106
        expires_in=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


def verify_access_token(token: str) -> TokenClaims | None:
    """Verify an access token and return its claims if valid."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        if payload.get("type") != "access":
            return None
        user_id = payload.get("sub")
        if user_id is None:
            return None
        return TokenClaims(user_id=int(user_id), role=payload.get("role", ""))
    except (InvalidTokenError, ValueError):
        return None
