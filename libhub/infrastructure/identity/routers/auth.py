import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.security import OAuth2PasswordRequestForm
from starlette import status

from libhub.application.identity.use_cases.authentication_use_case import AuthenticationUseCase
from libhub.core import container
from libhub.domain.identity.exceptions import InvalidCredentialsError
from libhub.infrastructure.common.di import inject_use_case
from libhub.infrastructure.common.ratelimit import LOGIN_LIMIT, limiter
from libhub.infrastructure.identity.services.token_service import AccessToken

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login")
@limiter.limit(LOGIN_LIMIT)  # type: ignore[misc]
async def login(
    request: Request,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> AccessToken:
    # OAuth2PasswordRequestForm uses 'username' field, but we use it for email
    try:
        _, token = use_case.authenticate_user(form_data.username, form_data.password)
        return token
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        ) from None
