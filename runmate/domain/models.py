"""Backend records as seen by the client."""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


def _as_float(value: Any, default: float = 0.0) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return number if math.isfinite(number) else default


def _as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _as_photos(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        return (value,) if value else ()
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(photo for photo in value if isinstance(photo, str) and photo)


@dataclass(frozen=True)
class Product:
    id: str
    name: str = ""
    price: float = 0.0
    stock: int = 0
    rating: float = 0.0
    photos: Tuple[str, ...] = ()
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        return cls(
            id=str(data.get("_id", data.get("id", ""))),
            name=_as_text(data.get("name")),
            price=_as_float(data.get("price")),
            stock=_as_int(data.get("stock")),
            rating=_as_float(data.get("rating")),
            photos=_as_photos(data.get("photos")),
            description=_as_text(data.get("description")),
        )

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    @property
    def thumbnail(self) -> str:
        return self.photos[0] if self.photos else ""


@dataclass(frozen=True)
class PageResult:
    """One page of a list endpoint: the items and the server's page count."""

    items: List[Any] = field(default_factory=list)
    pages: int = 0

    @classmethod
    def from_response(cls, data: Dict[str, Any], collection: str) -> "PageResult":
        """Normalize a list response; missing or malformed parts become empty."""
        raw_items = data.get(collection)
        if not isinstance(raw_items, list):
            raw_items = []
        items = [item for item in raw_items if isinstance(item, dict)]
        return cls(items=items, pages=max(_as_int(data.get("pages")), 0))
