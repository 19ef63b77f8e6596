"""Dependency injection container."""

from dataclasses import dataclass, field
from typing import Callable, Optional

from runmate.config import AppPaths, AppSettings
from runmate.managers import PagedListManager, ProductListManager
from runmate.services import CartService, CatalogApiClient, JsonCartStore


@dataclass
class AppContainer:
    settings: AppSettings
    paths: AppPaths

    _api_client: Optional[CatalogApiClient] = field(
        default=None, init=False, repr=False
    )
    _cart_service: Optional[CartService] = field(
        default=None, init=False, repr=False
    )

    @property
    def api_client(self) -> CatalogApiClient:
        if self._api_client is None:
            self._api_client = CatalogApiClient(
                self.settings.api.base_url, timeout=self.settings.api.timeout
            )
        return self._api_client

    @property
    def cart_service(self) -> CartService:
        if self._cart_service is None:
            self._cart_service = CartService(JsonCartStore(self.paths.cart_path))
        return self._cart_service

    def product_list(
        self, on_change: Optional[Callable[[], None]] = None
    ) -> ProductListManager:
        return ProductListManager(
            self.api_client,
            page_size=self.settings.catalog.page_size,
            cart=self.cart_service,
            on_change=on_change,
            root_margin=self.settings.catalog.root_margin,
        )

    def admin_list(self, resource: str, token: Optional[str] = None) -> PagedListManager:
        return PagedListManager(
            self.api_client,
            resource,
            page_size=self.settings.admin_page_size_for(resource),
            token=token,
        )

    async def close(self) -> None:
        if self._api_client is not None:
            await self._api_client.close()

    @classmethod
    def create(
        cls,
        settings: Optional[AppSettings] = None,
        paths: Optional[AppPaths] = None,
    ) -> "AppContainer":
        paths = paths or AppPaths.default()
        return cls(
            settings=settings or AppSettings.load(str(paths.config_path)),
            paths=paths,
        )
