"""Word listing API endpoints."""

from fastapi import APIRouter, HTTPException, Path

from ..models.response import WordListResponse
from ..models.word import Word
from ..service_instance import word_store

router = APIRouter(tags=["words"])


@router.get(
    "/words",
    response_model=WordListResponse,
    summary="List all words",
    description="Get every stored word in creation order"
)
async def list_words() -> WordListResponse:
    """List all stored words."""
    words = word_store.all_words()
    return WordListResponse(total_words=len(words), words=words)


@router.get(
    "/words/{word_id}",
    response_model=Word,
    name="show_word",
    summary="Show a word",
    description="Get a single word by its identifier"
)
async def show_word(
    word_id: int = Path(..., description="The word identifier", ge=1)
) -> Word:
    """
    Get a single word.
    
    Responds with 404 when no stored word has the given id.
    """
    word = word_store.find_by_id(word_id)
    if word is None:
        raise HTTPException(
            status_code=404,
            detail=f"Word {word_id} not found"
        )
    return word
