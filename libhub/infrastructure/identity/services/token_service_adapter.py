from libhub.infrastructure.identity.services import token_service
from libhub.infrastructure.identity.services.token_service import AccessToken


class TokenServiceAdapter:
    """Adapter wrapping token service functions for DI."""

    def create_access_token(self, user_id: int, role: str) -> AccessToken:
        return token_service.create_access_token(user_id, role)
