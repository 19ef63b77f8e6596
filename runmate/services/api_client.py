"""REST client for the RunMate catalog and admin list endpoints."""

import logging
from typing import Any, Dict, Optional

import httpx

from runmate.domain import FilterSet, PageResult, Product

logger = logging.getLogger("RunMate.ApiClient")


class CatalogApiClient:
    """Async HTTP client for `/products` and `/admin/<resource>` list calls.

    The backend answers every call with a JSON envelope
    ``{"success": bool, "<collection>": [...], "pages": int, "message": str}``.
    The body is read regardless of the HTTP status code, since application
    failures come back as ``success: false`` with a message.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize CatalogApiClient.

        Args:
            base_url: API root, e.g. http://localhost:5000/api
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "CatalogApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def fetch_products(
        self, filters: FilterSet, page: int, limit: int
    ) -> PageResult:
        """Fetch one storefront page of products matching the filters."""
        params = {"page": str(page), "limit": str(limit)}
        params.update(filters.to_query_params())

        data = await self._get_json("/products", params, collection="products")
        result = PageResult.from_response(data, "products")
        products = [Product.from_dict(item) for item in result.items]
        logger.debug(
            f"Fetched page {page}: {len(products)} products (pages: {result.pages})"
        )
        return PageResult(items=products, pages=result.pages)

    async def fetch_admin_page(
        self,
        resource: str,
        page: int,
        limit: int,
        filters: Optional[Dict[str, str]] = None,
        token: Optional[str] = None,
    ) -> PageResult:
        """Fetch one page of an admin table (products, orders, users)."""
        params = {"page": str(page), "limit": str(limit)}
        for key, value in (filters or {}).items():
            if value:
                params[key] = value

        headers = {}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        data = await self._get_json(
            f"/admin/{resource}", params, collection=resource, headers=headers
        )
        return PageResult.from_response(data, resource)

    async def _get_json(
        self,
        path: str,
        params: Dict[str, str],
        collection: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        try:
            response = await self.client.get(path, params=params, headers=headers)
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Request to {path} failed: {e}")
            raise NetworkError(f"Error loading {collection}") from e

        if not isinstance(data, dict) or not data.get("success"):
            message = data.get("message") if isinstance(data, dict) else None
            if not isinstance(message, str):
                message = None
            logger.warning(f"{path} reported failure: {message}")
            raise ApplicationError(message or f"Failed to fetch {collection}")

        return data


class ApiError(Exception):
    """Base error for failed list calls; `message` is user-facing."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(ApiError):
    """Transport failure or unreadable response body."""
    pass


class ApplicationError(ApiError):
    """The backend answered with success: false."""
    pass
