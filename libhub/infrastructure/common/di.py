import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider
from sqlalchemy.orm import Session

from libhub.core import container
from libhub.database import DatabaseSession

T = TypeVar("T")

# container.db is process-global; requests served from the threadpool
# must not interleave override and resolution
_override_lock = threading.Lock()


def resolve(provider: Provider[T], db: Session) -> T:
    """Build an object graph from the container against the given session."""
    with _override_lock:
        container.db.override(db)
        try:
            return provider()
        finally:
            container.db.reset_override()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Automatically handles container.db override with request-scoped database session.
    """

    def dependency(db: DatabaseSession) -> T:
        return resolve(provider, db)

    return dependency
