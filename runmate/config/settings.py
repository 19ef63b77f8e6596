"""Application settings configuration."""

from dataclasses import dataclass
from typing import Optional

import yaml


@dataclass(frozen=True)
class ApiSettings:
    base_url: str = "http://localhost:5000/api"
    timeout: float = 10.0


@dataclass(frozen=True)
class CatalogSettings:
    page_size: int = 12
    admin_page_size: int = 10
    admin_products_page_size: int = 12
    root_margin: int = 200


@dataclass(frozen=True)
class AppSettings:
    api: ApiSettings
    catalog: CatalogSettings

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppSettings":
        if path is None:
            path = "settings.yml"

        config = cls._load_yaml(path)
        return cls(
            api=ApiSettings(
                base_url=config.get("api_base_url", "http://localhost:5000/api"),
                timeout=config.get("api_timeout", 10.0),
            ),
            catalog=CatalogSettings(
                page_size=config.get("page_size", 12),
                admin_page_size=config.get("admin_page_size", 10),
                admin_products_page_size=config.get("admin_products_page_size", 12),
                root_margin=config.get("root_margin", 200),
            ),
        )

    def admin_page_size_for(self, resource: str) -> int:
        if resource == "products":
            return self.catalog.admin_products_page_size
        return self.catalog.admin_page_size

    @staticmethod
    def _load_yaml(path: str) -> dict:
        try:
            with open(path, "r") as f:
                config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            return {}
        except yaml.YAMLError:
            return {}
        return config if isinstance(config, dict) else {}
