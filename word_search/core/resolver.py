"""Search resolution: exact lookup first, then a case-insensitive substring scan."""

from typing import Callable, List, Optional, Sequence

from ..models.match import ExactMatch, FuzzyMatches, MatchResult
from ..models.word import Word
from .normalizer import QueryNormalizer

ExactLookup = Callable[[str], Optional[Word]]


class SearchResolver:
    """Resolves a raw query against a snapshot of stored words."""
    
    def __init__(self, normalizer: Optional[QueryNormalizer] = None) -> None:
        """
        Initialize the resolver.
        
        Args:
            normalizer: Normalizer used by the substring scan
        """
        self.normalizer = normalizer or QueryNormalizer()
    
    def resolve(
        self,
        query: str,
        all_words: Sequence[Word],
        exact_lookup: ExactLookup
    ) -> MatchResult:
        """
        Resolve a query to an exact match or an ordered list of substring matches.
        
        The exact lookup sees the query as typed. Only the substring scan
        is case-insensitive, so "apple" against a stored "Apple" is not exact.
        
        Args:
            query: Raw query string
            all_words: Snapshot of stored words, in store order
            exact_lookup: Case-sensitive lookup by name
            
        Returns:
            ExactMatch if the lookup finds a word, else FuzzyMatches (possibly empty)
        """
        word = exact_lookup(query)
        if word is not None:
            return ExactMatch(word=word)
        
        return FuzzyMatches(words=self.fuzzy_matches(query, all_words))
    
    def fuzzy_matches(self, query: str, all_words: Sequence[Word]) -> List[Word]:
        """
        Filter words whose name contains the query, ignoring case.
        
        An empty query matches every word.
        """
        needle = self.normalizer.normalize(query)
        return [
            word for word in all_words
            if self.normalizer.contains(word.name, needle)
        ]
