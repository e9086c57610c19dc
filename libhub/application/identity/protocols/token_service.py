from typing import Protocol

from libhub.infrastructure.identity.services.token_service import AccessToken


class TokenServiceProtocol(Protocol):
    def create_access_token(self, user_id: int, role: str) -> AccessToken: ...
