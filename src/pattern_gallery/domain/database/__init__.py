"""Database domain - Singleton pattern demonstration."""

from .connection import CREATED_MESSAGE, DatabaseConnection

__all__ = ["CREATED_MESSAGE", "DatabaseConnection"]
