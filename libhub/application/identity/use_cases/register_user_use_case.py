"""Use case for user registration."""

import structlog

from libhub.application.identity.protocols.password_service import PasswordServiceProtocol
from libhub.application.identity.protocols.user_repository import UserRepositoryProtocol
from libhub.domain.identity.entities.user import User, UserRole
from libhub.domain.identity.exceptions import EmailAlreadyExistsError, RegistrationDisabledError
from libhub.feature_flags import is_user_registrations_enabled

logger = structlog.get_logger(__name__)


class RegisterUserUseCase:
    """Use case for user registration operations."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.password_service = password_service

    def register_user(self, username: str, email: str, password: str) -> User:
        """
        Register a new member account.

        Raises:
            RegistrationDisabledError: If registration is disabled via feature flag
            EmailAlreadyExistsError: If email is already registered
            ValidationError: If username or email is invalid
        """
        if not is_user_registrations_enabled():
            raise RegistrationDisabledError

        if self.user_repository.find_by_email(email):
            raise EmailAlreadyExistsError(email)

        hashed_password = self.password_service.hash_password(password)

        user = User.create(username=username, email=email, hashed_password=hashed_password)
        user = self.user_repository.save(user)

        logger.info("user_registered", user_id=user.id.value, email=email)

        return user

    def ensure_admin(self, username: str, email: str, password: str) -> User | None:
        """
        Seed the first administrator account.

        Does nothing when no password is configured or the email is already
        taken. Bypasses the registration feature flag.
        """
        if not password:
            return None

        existing = self.user_repository.find_by_email(email)
        if existing:
            return existing

        user = User.create(
            username=username,
            email=email,
            hashed_password=self.password_service.hash_password(password),
            role=UserRole.ADMIN,
        )
        user = self.user_repository.save(user)

        logger.info("admin_user_created", user_id=user.id.value, email=email)

        return user
