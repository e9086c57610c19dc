"""Application-level exceptions carrying an HTTP status code."""

from fastapi import HTTPException
from starlette import status


class LibHubError(Exception):
    """Base exception for errors raised outside the domain layer."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(LibHubError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=404)


class ServiceUnavailableError(LibHubError):
    """A collaborator needed to answer the request is down."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=503)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)

AdminRequiredException = HTTPException(
    status_code=status.HTTP_403_FORBIDDEN,
    detail="Administrator privileges required",
)
