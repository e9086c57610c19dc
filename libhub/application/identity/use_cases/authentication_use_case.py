"""Use case for authentication operations."""

import structlog

from libhub.application.identity.protocols.password_service import PasswordServiceProtocol
from libhub.application.identity.protocols.token_service import TokenServiceProtocol
from libhub.application.identity.protocols.user_repository import UserRepositoryProtocol
from libhub.domain.common.value_objects.ids import UserId
from libhub.domain.identity.entities.user import User
from libhub.domain.identity.exceptions import InvalidCredentialsError, UserNotFoundError
from libhub.infrastructure.identity.services.token_service import AccessToken

logger = structlog.get_logger(__name__)


class AuthenticationUseCase:
    """Use case for authentication operations."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service

    def authenticate_user(self, email: str, password: str) -> tuple[User, AccessToken]:
        """
        Authenticate a user with email and password.

        Args:
            email: User's email address
            password: User's plain text password

        Returns:
            Tuple of (authenticated user, access token)

        Raises:
            InvalidCredentialsError: If credentials are invalid
        """
        user = self.user_repository.find_by_email(email)

        # Hash anyway so unknown emails take as long as wrong passwords
        if not user:
            self.password_service.verify_password(password, self.password_service.get_dummy_hash())
            raise InvalidCredentialsError

        if not user.hashed_password or not self.password_service.verify_password(
            password, user.hashed_password
        ):
            raise InvalidCredentialsError

        token = self.token_service.create_access_token(user.id.value, user.role.value)

        logger.info("user_authenticated", user_id=user.id.value, email=email)

        return user, token

    def get_user_by_id(self, user_id: int) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If user is not found
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)
        return user
