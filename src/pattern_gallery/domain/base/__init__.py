"""Base domain building blocks shared by every pattern."""

from .exceptions import (
    CapabilityNotSupportedError,
    ConfigurationError,
    DomainException,
    NoCommandBoundError,
    ScenarioNotFoundError,
    SingletonViolationError,
    UnsupportedVariantError,
)
from .observable import Observer, ValueSubject

__all__ = [
    "CapabilityNotSupportedError",
    "ConfigurationError",
    "DomainException",
    "NoCommandBoundError",
    "Observer",
    "ScenarioNotFoundError",
    "SingletonViolationError",
    "UnsupportedVariantError",
    "ValueSubject",
]
