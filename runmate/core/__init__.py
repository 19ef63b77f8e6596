"""Core interfaces and dependency injection.

Import AppContainer from runmate.core.di_container.
"""

from .protocols import AdminSourcePort, CartPort, ProductSourcePort, SentinelPort

__all__ = [
    "AdminSourcePort",
    "CartPort",
    "ProductSourcePort",
    "SentinelPort",
]
