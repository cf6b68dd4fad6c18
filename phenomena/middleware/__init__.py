"""Request middleware and exception handlers."""

from phenomena.middleware.error_handler import register_exception_handlers
from phenomena.middleware.logging import REQUEST_ID_HEADER, logging_middleware

__all__ = [
    "REQUEST_ID_HEADER",
    "register_exception_handlers",
    "logging_middleware",
]
