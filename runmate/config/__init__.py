"""Configuration management."""

from .paths import AppPaths
from .settings import ApiSettings, AppSettings, CatalogSettings

__all__ = ["AppSettings", "ApiSettings", "CatalogSettings", "AppPaths"]
