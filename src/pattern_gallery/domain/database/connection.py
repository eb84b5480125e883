"""Database connection manager - lazy, process-wide singleton."""
import logging
import threading
from typing import ClassVar, Optional

from pattern_gallery.domain.base.exceptions import SingletonViolationError

logger = logging.getLogger(__name__)

CREATED_MESSAGE = "New DatabaseConnection instance created."


class DatabaseConnection:
    """
    The one database connection shared by the whole process.

    Obtain it through ``get_instance()``; the first call constructs it and
    every later call returns that same object. Calling the constructor
    directly raises SingletonViolationError.
    """

    _instance: ClassVar[Optional["DatabaseConnection"]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()
    _constructing: ClassVar[bool] = False
    instances_created: ClassVar[int] = 0

    def __init__(self) -> None:
        if not DatabaseConnection._constructing:
            raise SingletonViolationError(type(self).__name__)
        DatabaseConnection.instances_created += 1
        logger.info(CREATED_MESSAGE)

    @classmethod
    def get_instance(cls) -> "DatabaseConnection":
        """Return the shared connection, creating it on first use."""
        if cls._instance is None:
            with cls._lock:
                # Re-check under the lock
                if cls._instance is None:
                    cls._constructing = True
                    try:
                        cls._instance = cls()
                    finally:
                        cls._constructing = False
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared connection. Intended for test isolation only."""
        with cls._lock:
            cls._instance = None
            cls.instances_created = 0

    def query(self, sql: str) -> str:
        logger.debug(f"Executing query on connection {id(self):#x}")
        return f"Executing query: {sql}"
