"""API route handlers."""

from .compatibility import router as compatibility_router
