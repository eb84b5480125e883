"""Error handling middleware for CLI handlers."""

import functools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from pattern_gallery.domain.base.exceptions import DomainException
from pattern_gallery.infrastructure.error.context import ExceptionContext
from pattern_gallery.infrastructure.logging.logger import get_logger

# Configure logger
logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


@dataclass(frozen=True)
class ErrorResponse:
    """Error payload returned to callers instead of a raised exception."""

    error_code: str
    message: str
    details: Any = None
    context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


def build_error_response(error: Exception, context: Optional[ExceptionContext] = None) -> ErrorResponse:
    """Translate an exception into an ErrorResponse, logging it with its context."""
    context_data = context.to_dict() if context else {}

    if isinstance(error, DomainException):
        logger.warning("Domain error", error=type(error).__name__, message=str(error), **context_data)
        return ErrorResponse(
            error_code=type(error).__name__,
            message=error.message,
            details=error.details,
            context=context_data,
        )

    logger.error(
        "Unexpected error", error=type(error).__name__, message=str(error), exc_info=True, **context_data
    )
    return ErrorResponse(
        error_code="InternalError",
        message=str(error),
        context=context_data,
    )


def with_error_handling(operation: str, layer: str = "interface"):
    """
    Decorator for adding error handling to CLI handler functions.

    The wrapped function's return value becomes ``(result, EXIT_OK)``. Any
    exception is logged and becomes ``(error_payload, EXIT_ERROR)``.

    Args:
        operation: Operation name recorded in the exception context
        layer: Architectural layer recorded in the exception context

    Returns:
        Decorator function
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Tuple[Any, int]]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Tuple[Any, int]:
            try:
                return func(*args, **kwargs), EXIT_OK
            except Exception as e:
                context = ExceptionContext.for_operation(operation, layer=layer, handler=func.__name__)
                return build_error_response(e, context).to_dict(), EXIT_ERROR

        return wrapper

    return decorator
