"""Infrastructure patterns package."""

from .singleton_access import get_singleton
from .singleton_registry import SingletonRegistry

__all__ = ["SingletonRegistry", "get_singleton"]
