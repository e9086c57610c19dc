import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from libhub.application.identity.use_cases.authentication_use_case import AuthenticationUseCase
from libhub.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from libhub.core import container
from libhub.domain.common.exceptions import ValidationError
from libhub.domain.common.value_objects.ids import UserId
from libhub.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    RegistrationDisabledError,
    UserNotFoundError,
)
from libhub.infrastructure.common.di import inject_use_case
from libhub.infrastructure.common.ratelimit import REGISTER_LIMIT, limiter
from libhub.infrastructure.identity.dependencies import CurrentUser
from libhub.infrastructure.identity.schemas import UserRegisterRequest, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
@limiter.limit(REGISTER_LIMIT)  # type: ignore[misc]
async def register(
    request: Request,
    register_data: UserRegisterRequest,
    use_case: RegisterUserUseCase = Depends(inject_use_case(container.register_user_use_case)),
) -> UserResponse:
    """Register a new member account."""
    try:
        user = use_case.register_user(
            register_data.username, register_data.email, register_data.password
        )
        return UserResponse.from_domain(user)
    except RegistrationDisabledError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User registration is currently disabled",
        ) from None
    except EmailAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        ) from None
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.get("/me")
async def get_me(current_user: CurrentUser) -> UserResponse:
    """Get the current user's profile information."""
    return UserResponse.from_domain(current_user)


@router.get("/{user_id}")
async def get_user(
    user_id: int,
    current_user: CurrentUser,
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> UserResponse:
    """Get a user's profile. Members may only read their own."""
    if not current_user.can_access_user_data(UserId(user_id)):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not allowed to view this user",
        )
    try:
        return UserResponse.from_domain(use_case.get_user_by_id(user_id))
    except UserNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"User {user_id} not found"
        ) from None
