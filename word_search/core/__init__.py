"""Core search functionality."""

from .normalizer import QueryNormalizer
from .resolver import SearchResolver
from .service import SearchService, redirect_target
from .store import InMemoryWordStore, WordStore

__all__ = [
    "QueryNormalizer",
    "SearchResolver",
    "SearchService",
    "redirect_target",
    "WordStore",
    "InMemoryWordStore",
]
