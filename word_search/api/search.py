"""Search API endpoint."""

from typing import Optional, Union

from fastapi import APIRouter, Query, Request
from fastapi.responses import RedirectResponse

from ..config import get_settings
from ..models.match import ExactMatch
from ..models.response import SearchResponse
from ..service_instance import search_service

router = APIRouter(tags=["search"])
settings = get_settings()


@router.get(
    "/search",
    response_model=None,
    summary="Search words",
    description="Redirect to a word when the keyword resolves to exactly one, otherwise list matches"
)
async def search_words(
    request: Request,
    keyword: Optional[str] = Query(None, description="The keyword to search for")
) -> Union[RedirectResponse, SearchResponse]:
    """
    Search stored words by keyword.
    
    An exact name match, or a single case-insensitive substring match,
    redirects to that word's page. Otherwise the matches are listed,
    with a message when there are none.
    """
    outcome = search_service.search(keyword)
    
    if outcome.redirect_to is not None:
        url = request.app.url_path_for("show_word", word_id=str(outcome.redirect_to.id))
        return RedirectResponse(url=str(url), status_code=settings.redirect_status_code)
    
    results = outcome.results
    return SearchResponse(
        keyword=outcome.keyword,
        exact_match=isinstance(outcome.match, ExactMatch),
        total_results=len(results),
        results=results,
        message=None if results else f"No results found for '{outcome.keyword}'",
        execution_time_ms=outcome.execution_time_ms
    )
