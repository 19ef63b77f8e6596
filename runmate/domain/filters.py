"""Product filter set for catalog queries."""

from dataclasses import dataclass, fields, replace
from typing import Dict, Tuple, Union

FilterValue = Union[str, int, float, None]

CATEGORIES: Tuple[Tuple[str, str], ...] = (
    ("lsd", "Long Slow Distance"),
    ("daily", "Daily Trainers"),
    ("tempo", "Tempo Shoes"),
    ("super", "Super Shoes"),
    ("sports", "Sports Apparel"),
)

RATING_OPTIONS: Tuple[Tuple[str, str], ...] = (
    ("4", "4★ & up"),
    ("3", "3★ & up"),
    ("2", "2★ & up"),
    ("1", "1★ & up"),
)

# Field name -> query parameter sent to the backend
QUERY_PARAMS: Dict[str, str] = {
    "search": "search",
    "category": "category",
    "min_price": "minPrice",
    "max_price": "maxPrice",
    "min_rating": "minRating",
}


def normalize_value(value: FilterValue) -> str:
    """Empty string and None mean "unset"; anything else is sent as text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


@dataclass(frozen=True)
class FilterSet:
    search: str = ""
    category: str = ""
    min_price: str = ""
    max_price: str = ""
    min_rating: str = ""

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def with_changes(self, **changes: FilterValue) -> "FilterSet":
        unknown = set(changes) - set(self.field_names())
        if unknown:
            raise ValueError(f"Unknown filter field(s): {sorted(unknown)}")
        normalized = {name: normalize_value(value) for name, value in changes.items()}
        return replace(self, **normalized)

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in self.field_names())

    def to_query_params(self) -> Dict[str, str]:
        params = {}
        for name, param in QUERY_PARAMS.items():
            value = getattr(self, name)
            if value:
                params[param] = value
        return params
