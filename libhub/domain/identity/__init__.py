"""Identity domain layer."""

from libhub.domain.identity.entities.user import User, UserRole
from libhub.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    RegistrationDisabledError,
    UserNotFoundError,
)

__all__ = [
    "EmailAlreadyExistsError",
    "InvalidCredentialsError",
    "RegistrationDisabledError",
    "User",
    "UserNotFoundError",
    "UserRole",
]
