"""Catalog port served by a remote catalog over its REST API."""

import logging

import httpx

from libhub.domain.catalog.exceptions import BookNotFoundError, OutOfStockError, OverCapacityError
from libhub.domain.common.value_objects.ids import BookId
from libhub.domain.loans.exceptions import CatalogUnavailableError

logger = logging.getLogger(__name__)


class CatalogHttpClient:
    """
    HTTP client for the catalog's availability and stock endpoints.

    Calls are made once with no retry. Every way a call can go wrong ends
    up as a domain error, so the borrowing coordinator can compensate
    without knowing about HTTP:

    - 404 -> BookNotFoundError
    - 409 on a stock change -> OutOfStockError or OverCapacityError by direction
    - any other non-2xx, timeout or connection error -> CatalogUnavailableError
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def is_book_available(self, book_id: BookId) -> bool:
        response = self._request(
            "GET", f"/books/{book_id.value}/availability", operation="availability check"
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            raise BookNotFoundError(book_id.value)
        self._raise_for_unexpected(response, "availability check")
        try:
            return bool(response.json()["isAvailable"])
        except (ValueError, KeyError, TypeError) as e:
            raise CatalogUnavailableError(
                "availability check", f"malformed response body: {response.text[:200]}"
            ) from e

    def update_book_stock(self, book_id: BookId, change_amount: int) -> None:
        response = self._request(
            "PUT",
            f"/books/{book_id.value}/stock",
            operation="stock update",
            json={"changeAmount": change_amount},
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            raise BookNotFoundError(book_id.value)
        if response.status_code == httpx.codes.CONFLICT:
            if change_amount < 0:
                raise OutOfStockError(book_id.value)
            raise OverCapacityError(book_id.value)
        self._raise_for_unexpected(response, "stock update")

    def _request(
        self, method: str, path: str, operation: str, **kwargs: object
    ) -> httpx.Response:
        try:
            return self._client.request(method, path, **kwargs)  # type: ignore[arg-type]
        except httpx.HTTPError as e:
            logger.warning(f"Catalog {operation} failed: {e!r}")
            raise CatalogUnavailableError(operation, str(e) or type(e).__name__) from e

    @staticmethod
    def _raise_for_unexpected(response: httpx.Response, operation: str) -> None:
        if response.is_success:
            return
        logger.warning(
            f"Catalog {operation} answered {response.status_code}: {response.text[:200]}"
        )
        raise CatalogUnavailableError(operation, f"catalog responded {response.status_code}")
