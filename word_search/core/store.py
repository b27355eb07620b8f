"""Word storage: the collaborator contract and an in-memory implementation."""

import time
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

import structlog

from ..models.word import Word

logger = structlog.get_logger(__name__)


class WordStore(ABC):
    """Read interface the search core depends on."""
    
    @abstractmethod
    def all_words(self) -> List[Word]:
        """Return a snapshot of every stored word in stable order."""
    
    @abstractmethod
    def find_by_exact_name(self, name: str) -> Optional[Word]:
        """Return the first word whose name equals ``name`` (case-sensitive), or None."""
    
    @abstractmethod
    def find_by_id(self, word_id: int) -> Optional[Word]:
        """Return the word with the given id, or None."""


class InMemoryWordStore(WordStore):
    """Word store backed by an insertion-ordered dict, keyed by id."""
    
    def __init__(self) -> None:
        """Initialize an empty store."""
        self._words: Dict[int, Word] = {}
        self._next_id = 1
        self._stats = {
            "total_words": 0,
            "last_updated": None
        }
    
    def __len__(self) -> int:
        return len(self._words)
    
    def add_word(self, name: str) -> Word:
        """
        Create and store a new word.
        
        Args:
            name: The word's name; duplicates are allowed
            
        Returns:
            The created Word
            
        Raises:
            ValueError: If the name is empty
        """
        if not name:
            raise ValueError("Word name cannot be empty")
        
        now = datetime.now(timezone.utc)
        word = Word(id=self._next_id, name=name, created_at=now, updated_at=now)
        self._words[word.id] = word
        self._next_id += 1
        
        self._stats["total_words"] = len(self._words)
        self._stats["last_updated"] = time.time()
        
        return word
    
    def load_words(self, names: Iterable[str]) -> List[Word]:
        """
        Bulk-create words in the given order.
        
        Args:
            names: Word names to add
            
        Returns:
            The created words
        """
        created = [self.add_word(name) for name in names]
        logger.info("Words loaded", count=len(created), total_words=len(self._words))
        return created
    
    def remove_word(self, word_id: int) -> bool:
        """
        Remove a word by id.
        
        Returns:
            True if removed, False if not found
        """
        if word_id not in self._words:
            return False
        
        del self._words[word_id]
        self._stats["total_words"] = len(self._words)
        self._stats["last_updated"] = time.time()
        return True
    
    def all_words(self) -> List[Word]:
        return list(self._words.values())
    
    def find_by_exact_name(self, name: str) -> Optional[Word]:
        for word in self._words.values():
            if word.name == name:
                return word
        return None
    
    def find_by_id(self, word_id: int) -> Optional[Word]:
        return self._words.get(word_id)
    
    def get_stats(self) -> Dict[str, Any]:
        """Get store statistics."""
        return self._stats.copy()
    
    def clear(self) -> None:
        """Remove all words and restart the id sequence."""
        self._words.clear()
        self._next_id = 1
        self._stats = {
            "total_words": 0,
            "last_updated": time.time()
        }
