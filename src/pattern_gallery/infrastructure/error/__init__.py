"""Error handling infrastructure."""

from .context import ExceptionContext
from .error_middleware import ErrorResponse, build_error_response, with_error_handling

__all__ = ["ErrorResponse", "ExceptionContext", "build_error_response", "with_error_handling"]
