"""Domain value objects."""

from .filters import CATEGORIES, RATING_OPTIONS, FilterSet
from .models import PageResult, Product

__all__ = ["FilterSet", "CATEGORIES", "RATING_OPTIONS", "Product", "PageResult"]
