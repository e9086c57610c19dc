"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from libhub.config import get_settings
from libhub.core import container
from libhub.database import DatabaseSession
from libhub.domain.identity.entities.user import User
from libhub.domain.identity.exceptions import UserNotFoundError
from libhub.exceptions import AdminRequiredException, CredentialsException
from libhub.infrastructure.common.di import resolve
from libhub.infrastructure.identity.services.token_service import verify_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{get_settings().API_V1_PREFIX}/auth/login")


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)], db: DatabaseSession
) -> User:
    """
    Get the current authenticated user from the access token.

    The role is read from the database rather than the token, so a demoted
    admin loses access before the token expires.

    Raises:
        CredentialsException: If token is invalid or user not found
    """
    claims = verify_access_token(token)
    if claims is None:
        raise CredentialsException

    use_case = resolve(container.authentication_use_case, db)

    try:
        return use_case.get_user_by_id(claims.user_id)
    except UserNotFoundError:
        raise CredentialsException from None


async def require_admin(current_user: Annotated[User, Depends(get_current_user)]) -> User:
    if not current_user.is_admin():
        raise AdminRequiredException
    return current_user


CurrentUser = Annotated[User, Depends(get_current_user)]
AdminUser = Annotated[User, Depends(require_admin)]
