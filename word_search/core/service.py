"""Search service: runs the resolver against a word store and decides on redirects."""

import time
from typing import Any, Dict, Optional

import structlog

from ..models.match import ExactMatch, MatchResult, SearchOutcome
from ..models.word import Word
from .resolver import SearchResolver
from .store import WordStore

logger = structlog.get_logger(__name__)


def redirect_target(match: MatchResult) -> Optional[Word]:
    """
    Pick the word a search should redirect to.
    
    An exact match redirects to its word. A single substring match is
    treated the same way. Anything else shows a list.
    """
    if isinstance(match, ExactMatch):
        return match.word
    if len(match.words) == 1:
        return match.words[0]
    return None


class SearchService:
    """Search entry point used by the web layer."""
    
    def __init__(self, store: WordStore, resolver: Optional[SearchResolver] = None) -> None:
        """
        Initialize the search service.
        
        Args:
            store: Word store to search
            resolver: Resolver to use; a default one is created if omitted
        """
        self.store = store
        self.resolver = resolver or SearchResolver()
        self._stats = self._empty_stats()
    
    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "exact_matches": 0,
            "single_matches": 0,
            "multiple_matches": 0,
            "no_matches": 0,
            "total_execution_time": 0.0
        }
    
    def search(self, keyword: Optional[str]) -> SearchOutcome:
        """
        Search the store for a keyword.
        
        Args:
            keyword: Raw keyword from the request; None is treated as empty
            
        Returns:
            SearchOutcome with the match and an optional redirect target
        """
        start_time = time.time()
        keyword = keyword if keyword is not None else ""
        
        # One snapshot per search; concurrent writes may or may not be visible
        all_words = self.store.all_words()
        match = self.resolver.resolve(keyword, all_words, self.store.find_by_exact_name)
        target = redirect_target(match)
        
        execution_time = (time.time() - start_time) * 1000
        self._record(match, execution_time)
        
        outcome = SearchOutcome(
            keyword=keyword,
            match=match,
            redirect_to=target,
            execution_time_ms=execution_time
        )
        logger.info(
            "Search resolved",
            keyword=keyword,
            match_kind=match.kind,
            total_results=len(outcome.results),
            redirect_to=target.id if target else None,
            execution_time_ms=round(execution_time, 3)
        )
        return outcome
    
    def _record(self, match: MatchResult, execution_time: float) -> None:
        self._stats["total_queries"] += 1
        self._stats["total_execution_time"] += execution_time
        
        if isinstance(match, ExactMatch):
            self._stats["exact_matches"] += 1
        elif len(match.words) == 1:
            self._stats["single_matches"] += 1
        elif match.words:
            self._stats["multiple_matches"] += 1
        else:
            self._stats["no_matches"] += 1
    
    def get_stats(self) -> Dict[str, Any]:
        """Get search statistics."""
        stats = self._stats.copy()
        total = stats["total_queries"]
        
        # Calculate averages
        if total > 0:
            stats["average_execution_time_ms"] = stats["total_execution_time"] / total
            stats["exact_match_rate"] = stats["exact_matches"] / total
            stats["redirect_rate"] = (stats["exact_matches"] + stats["single_matches"]) / total
            stats["no_match_rate"] = stats["no_matches"] / total
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["exact_match_rate"] = 0.0
            stats["redirect_rate"] = 0.0
            stats["no_match_rate"] = 0.0
        
        stats["store_stats"] = self.store.get_stats() if hasattr(self.store, "get_stats") else {}
        
        return stats
    
    def reset_stats(self) -> None:
        """Reset search statistics."""
        self._stats = self._empty_stats()
