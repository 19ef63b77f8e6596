"""RunMate storefront client - catalog listing and admin list controllers."""

__version__ = "0.1.0"
