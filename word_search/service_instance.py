"""Global word store and search service instances to avoid circular imports."""

from .core.service import SearchService
from .core.store import InMemoryWordStore

# Global instances shared by the API routers
word_store = InMemoryWordStore()
search_service = SearchService(word_store)
