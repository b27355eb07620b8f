"""Word entity model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Word(BaseModel):
    """A stored word. Created and owned by the word store; read-only elsewhere."""
    
    model_config = ConfigDict(frozen=True)
    
    id: int = Field(..., ge=1, description="Store-assigned identifier")
    name: str = Field(..., min_length=1, description="The word itself")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
