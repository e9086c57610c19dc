"""User entity for identity management."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from libhub.domain.common.entity import Entity
from libhub.domain.common.exceptions import ValidationError
from libhub.domain.common.value_objects.ids import UserId

# Domain constraints
MAX_EMAIL_LENGTH = 100
MAX_USERNAME_LENGTH = 100


class UserRole(StrEnum):
    MEMBER = "User"
    ADMIN = "Admin"


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity representing a library member or administrator.

    Business Rules:
    - Email must be unique (enforced at repository level)
    - Username and email must be non-empty and at most 100 characters
    - Password hashing is an infrastructure concern (never stored as plain text)
    - Only admins manage the catalog or read other members' loans
    """

    id: UserId
    username: str
    email: str
    hashed_password: str | None = None
    role: UserRole = UserRole.MEMBER
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self._validate_username(self.username)
        self._validate_email(self.email)

    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def has_password(self) -> bool:
        """Check if this user has a password set."""
        return self.hashed_password is not None

    def can_access_user_data(self, user_id: UserId) -> bool:
        """Members see their own records, admins see everyone's."""
        return self.is_admin() or self.id == user_id

    def update_profile(self, username: str | None = None, email: str | None = None) -> None:
        """
        Update username and/or email; blank values leave the field unchanged.

        Raises:
            ValidationError: If a provided value is too long
        """
        if username and username.strip():
            self._validate_username(username)
            self.username = username.strip()
        if email and email.strip():
            self._validate_email(email)
            self.email = email.strip()

    @staticmethod
    def _validate_username(username: str) -> None:
        if not username or not username.strip():
            raise ValidationError("Username cannot be empty", field="username", value=username)
        if len(username) > MAX_USERNAME_LENGTH:
            raise ValidationError(
                f"Username cannot exceed {MAX_USERNAME_LENGTH} characters",
                field="username",
                value=username,
            )

    @staticmethod
    def _validate_email(email: str) -> None:
        if not email:
            raise ValidationError("Email cannot be empty", field="email", value=email)
        if len(email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters", field="email", value=email
            )

    @classmethod
    def create(
        cls,
        username: str,
        email: str,
        hashed_password: str | None = None,
        role: UserRole = UserRole.MEMBER,
    ) -> "User":
        """
        Create a new user.

        Raises:
            ValidationError: If username or email is invalid
        """
        return cls(
            id=UserId.generate(),
            username=username.strip() if username else username,
            email=email.strip() if email else email,
            hashed_password=hashed_password,
            role=role,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        username: str,
        email: str,
        hashed_password: str | None,
        role: UserRole,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            username=username,
            email=email,
            hashed_password=hashed_password,
            role=role,
            created_at=created_at,
            updated_at=updated_at,
        )
