"""Search resolution result models."""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .word import Word


class ExactMatch(BaseModel):
    """A stored word whose name equals the raw query."""
    
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["exact"] = "exact"
    word: Word = Field(..., description="The exactly matching word")


class FuzzyMatches(BaseModel):
    """Words whose lower-cased name contains the lower-cased query, in store order."""
    
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["fuzzy"] = "fuzzy"
    words: List[Word] = Field(default_factory=list, description="Matching words")


MatchResult = Union[ExactMatch, FuzzyMatches]


class SearchOutcome(BaseModel):
    """What the search caller decided for a keyword."""
    
    keyword: str = Field(..., description="The raw keyword as received")
    match: MatchResult = Field(..., discriminator="kind")
    redirect_to: Optional[Word] = Field(None, description="Word to redirect to, if any")
    execution_time_ms: float = Field(0.0, description="Resolution time in milliseconds")
    
    @property
    def results(self) -> List[Word]:
        """Words to list when not redirecting."""
        if isinstance(self.match, ExactMatch):
            return [self.match.word]
        return list(self.match.words)
