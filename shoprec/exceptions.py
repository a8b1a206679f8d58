from __future__ import annotations


class ShoprecError(Exception):
    """Base exception for the recommendation service."""


class DatasetLoadError(ShoprecError):
    """Raised when the ratings or category dataset cannot be loaded."""
