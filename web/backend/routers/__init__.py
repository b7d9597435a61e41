"""API route handlers."""

from .matches import router as matches_router
from .profiles import router as profiles_router
