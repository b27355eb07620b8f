"""Response models for API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .word import Word


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WordListResponse(BaseModel):
    """Response for the words index."""
    
    total_words: int = Field(..., description="Number of stored words")
    words: List[Word] = Field(..., description="All words in store order")


class SearchResponse(BaseModel):
    """Response for searches that do not redirect."""
    
    keyword: str = Field(..., description="Original search keyword")
    exact_match: bool = Field(..., description="Whether an exact match was found")
    total_results: int = Field(..., description="Total number of results")
    results: List[Word] = Field(..., description="Matching words in store order")
    message: Optional[str] = Field(None, description="Message shown when nothing matched")
    execution_time_ms: float = Field(..., description="Search execution time in milliseconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Error response model."""
    
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")
