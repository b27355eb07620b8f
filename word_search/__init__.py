"""
Word Search - look up stored words by name.

A search redirects to a word when the keyword names it exactly, or when
exactly one word contains the keyword ignoring case. Otherwise the matching
words are listed.
"""

__version__ = "1.0.0"

from .core.resolver import SearchResolver
from .core.service import SearchService
from .core.store import InMemoryWordStore, WordStore
from .models.match import ExactMatch, FuzzyMatches, SearchOutcome
from .models.word import Word

__all__ = [
    "SearchResolver",
    "SearchService",
    "WordStore",
    "InMemoryWordStore",
    "Word",
    "ExactMatch",
    "FuzzyMatches",
    "SearchOutcome",
]
