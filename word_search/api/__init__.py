"""API endpoints for the word search service."""

from .health import router as health_router
from .search import router as search_router
from .words import router as words_router

__all__ = [
    "search_router",
    "words_router",
    "health_router",
]
