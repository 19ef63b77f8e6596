"""Backend access and client-side services."""

from .api_client import ApiError, ApplicationError, CatalogApiClient, NetworkError
from .cart_service import CartItem, CartService
from .cart_store import JsonCartStore

__all__ = [
    "CatalogApiClient",
    "ApiError",
    "ApplicationError",
    "NetworkError",
    "CartService",
    "CartItem",
    "JsonCartStore",
]
