# src/pattern_gallery/domain/base/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert exception to a dictionary for error payloads."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class UnsupportedVariantError(DomainException):
    """Raised when a selector is asked for a variant tag it does not know."""

    def __init__(self, kind: str, tag: str, message: Optional[str] = None):
        super().__init__(message or f"{kind} type not supported: {tag!r}")
        self.kind = kind
        self.tag = tag


class CapabilityNotSupportedError(DomainException):
    """Raised when a target does not provide the requested operation."""

    def __init__(self, target_type: str, operation: str):
        super().__init__(f"{target_type} does not support operation '{operation}'")
        self.target_type = target_type
        self.operation = operation


class NoCommandBoundError(DomainException):
    """Raised when an invoker is triggered before a command was bound."""

    def __init__(self, invoker: str):
        super().__init__(f"No command bound to {invoker}")
        self.invoker = invoker


class SingletonViolationError(DomainException):
    """Raised when a singleton is constructed outside its accessor."""

    def __init__(self, class_name: str):
        super().__init__(
            f"{class_name} is a singleton; use {class_name}.get_instance() instead"
        )
        self.class_name = class_name


class ScenarioNotFoundError(DomainException):
    """Raised when a requested usage scenario is not registered."""

    def __init__(self, name: str, available: Optional[List[str]] = None):
        super().__init__(f"Scenario '{name}' not found", {"available": available or []})
        self.name = name
        self.available = available or []


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
