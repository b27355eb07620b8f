"""Query normalization used by the substring scan."""

from typing import Optional


class QueryNormalizer:
    """Case normalization for queries and stored names."""
    
    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize text for case-insensitive comparison.
        
        Only lower-cases; whitespace and punctuation are left untouched.
        
        Args:
            text: Input text, possibly None
            
        Returns:
            Lower-cased text, or an empty string for None
        """
        if not text:
            return ""
        
        return text.lower()
    
    def contains(self, haystack: Optional[str], normalized_needle: str) -> bool:
        """
        Check whether a normalized needle occurs in a haystack.
        
        The haystack is normalized here; the needle must already be.
        An empty needle is contained in every string.
        
        Args:
            haystack: Text to search in
            normalized_needle: Already-normalized text to search for
            
        Returns:
            True if the needle occurs in the normalized haystack
        """
        return normalized_needle in self.normalize(haystack)
