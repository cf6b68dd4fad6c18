"""API routers."""

from phenomena.routers import health, reports

__all__ = ["health", "reports"]
