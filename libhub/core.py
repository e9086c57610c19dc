from collections.abc import Iterator

from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from libhub.application.catalog.use_cases.book_management_use_case import BookManagementUseCase
from libhub.application.catalog.use_cases.inventory_use_case import InventoryUseCase
from libhub.application.identity.use_cases.authentication_use_case import AuthenticationUseCase
from libhub.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from libhub.application.loans.use_cases.borrow_book_use_case import BorrowBookUseCase
from libhub.application.loans.use_cases.loan_query_use_case import LoanQueryUseCase
from libhub.application.loans.use_cases.return_book_use_case import ReturnBookUseCase
from libhub.config import get_settings
from libhub.feature_flags import get_feature_flag
from libhub.infrastructure.catalog.repositories import BookRepository, InventoryLedger
from libhub.infrastructure.identity.repositories.user_repository import UserRepository
from libhub.infrastructure.identity.services.password_service_adapter import (
    PasswordServiceAdapter,
)
from libhub.infrastructure.identity.services.token_service_adapter import TokenServiceAdapter
from libhub.infrastructure.loans.clients import CatalogHttpClient
from libhub.infrastructure.loans.repositories import LoanRepository
from libhub.infrastructure.loans.services import LocalCatalogAdapter


def _catalog_mode() -> str:
    return "http" if get_feature_flag("remote_catalog") else "local"


def _catalog_http_client() -> Iterator[CatalogHttpClient]:
    settings = get_settings()
    client = CatalogHttpClient(
        base_url=settings.CATALOG_SERVICE_URL or "",
        token=settings.CATALOG_SERVICE_TOKEN,
        timeout=settings.CATALOG_SERVICE_TIMEOUT_SECONDS,
    )
    try:
        yield client
    finally:
        client.close()


def _inventory_max_attempts() -> int:
    return get_settings().INVENTORY_MAX_ATTEMPTS


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    book_repository = providers.Factory(BookRepository, db=db)
    inventory_ledger = providers.Factory(
        InventoryLedger, db=db, max_attempts=providers.Callable(_inventory_max_attempts)
    )
    loan_repository = providers.Factory(LoanRepository, db=db)

    # Identity repositories and services
    user_repository = providers.Factory(UserRepository, db=db)
    password_service = providers.Singleton(PasswordServiceAdapter)
    token_service = providers.Singleton(TokenServiceAdapter)

    # Catalog module
    book_management_use_case = providers.Factory(
        BookManagementUseCase,
        book_repository=book_repository,
        inventory_ledger=inventory_ledger,
    )
    inventory_use_case = providers.Factory(InventoryUseCase, inventory_ledger=inventory_ledger)

    # How loans reach the catalog: in-process unless CATALOG_SERVICE_URL is set
    catalog_service = providers.Selector(
        _catalog_mode,
        local=providers.Factory(LocalCatalogAdapter, inventory_use_case=inventory_use_case),
        http=providers.Resource(_catalog_http_client),
    )

    # Loans module
    borrow_book_use_case = providers.Factory(
        BorrowBookUseCase,
        loan_repository=loan_repository,
        catalog_service=catalog_service,
    )
    return_book_use_case = providers.Factory(
        ReturnBookUseCase,
        loan_repository=loan_repository,
        catalog_service=catalog_service,
    )
    loan_query_use_case = providers.Factory(LoanQueryUseCase, loan_repository=loan_repository)

    # Identity module
    authentication_use_case = providers.Factory(
        AuthenticationUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )
    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
    )


# Initialize container
container = Container()
