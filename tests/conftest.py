import logging
import os

import pytest

from pattern_gallery.domain.database import DatabaseConnection
from pattern_gallery.infrastructure.patterns import SingletonRegistry


@pytest.fixture(autouse=True)
def reset_singletons():
    """Give every test a fresh database connection and singleton registry."""
    DatabaseConnection.reset_instance()
    SingletonRegistry.get_instance().reset()
    yield
    DatabaseConnection.reset_instance()
    SingletonRegistry.get_instance().reset()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by setup_logging()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove PATTERN_GALLERY_* variables that could leak in from the shell."""
    for name in list(os.environ):
        if name.startswith("PATTERN_GALLERY_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch
