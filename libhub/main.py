"""FastAPI application for the LibHub lending platform."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette import status

from libhub.config import configure_logging, get_settings
from libhub.core import container
from libhub.database import Base, dispose_engine, get_engine, get_session_factory
from libhub.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    ValidationError,
)
from libhub.exceptions import LibHubError
from libhub.infrastructure.catalog.routers import books
from libhub.infrastructure.common.di import resolve
from libhub.infrastructure.common.ratelimit import limiter, rate_limit_exceeded_handler
from libhub.infrastructure.common.routers import settings as settings_router
from libhub.infrastructure.identity.routers import auth, users
from libhub.infrastructure.loans.routers import loans

settings = get_settings()
configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def _seed_admin() -> None:
    """Create the first administrator from ADMIN_* settings, if configured."""
    db = get_session_factory(settings)()
    try:
        use_case = resolve(container.register_user_use_case, db)
        use_case.ensure_admin(
            settings.ADMIN_USERNAME, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD
        )
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    get_session_factory(settings)
    if settings.DATABASE_URL.startswith("sqlite"):
        # Postgres deployments are migrated with alembic
        Base.metadata.create_all(bind=get_engine())
    _seed_admin()
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} started ({settings.ENVIRONMENT})")
    try:
        yield
    finally:
        container.shutdown_resources()
        dispose_engine()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)  # type: ignore[arg-type]

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LibHubError)
async def libhub_error_handler(request: Request, exc: LibHubError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


_DOMAIN_ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_409_CONFLICT),
]


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Fallback for domain errors a router did not translate itself."""
    code = next(
        (code for error_type, code in _DOMAIN_ERROR_STATUS if isinstance(exc, error_type)),
        status.HTTP_400_BAD_REQUEST,
    )
    logger.warning(f"Unhandled domain error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=code, content={"detail": exc.message})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for unhandled exceptions."""
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!r}", exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred. Please try again later."},
    )


app.include_router(auth.router, prefix=settings.API_V1_PREFIX)
app.include_router(users.router, prefix=settings.API_V1_PREFIX)
app.include_router(books.router, prefix=settings.API_V1_PREFIX)
app.include_router(loans.router, prefix=settings.API_V1_PREFIX)
app.include_router(settings_router.router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@app.get(f"{settings.API_V1_PREFIX}/")
async def api_root() -> dict[str, str]:
    return {
        "message": f"{settings.PROJECT_NAME} v1",
        "version": settings.VERSION,
        "docs": "/docs",
    }
