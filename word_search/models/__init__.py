"""Data models for the word search service."""

from .match import ExactMatch, FuzzyMatches, MatchResult, SearchOutcome
from .response import (
    ErrorResponse,
    HealthResponse,
    SearchResponse,
    WordListResponse,
)
from .word import Word

__all__ = [
    "Word",
    "ExactMatch",
    "FuzzyMatches",
    "MatchResult",
    "SearchOutcome",
    "WordListResponse",
    "SearchResponse",
    "ErrorResponse",
    "HealthResponse",
]
