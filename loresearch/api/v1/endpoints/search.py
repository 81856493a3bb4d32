"""Search API: keyword search across all entities of the store."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from loresearch.api.v1.dependencies import get_search_service, get_store_repository
from loresearch.application.interfaces.repositories import IStoreRepository
from loresearch.application.use_cases.search import SearchService
from loresearch.core.config import get_settings
from loresearch.core.limiter import limit_search
from loresearch.domain.exceptions import ValidationException
from loresearch.domain.value_objects import SearchQuery
from loresearch.pages.labels import relevance_label
from loresearch.schemas.search import (
    ErrorResponse,
    SearchResponse,
    SearchResultResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=SearchResponse,
    responses={
        400: {"description": "Invalid query", "model": ErrorResponse},
        503: {"description": "Store document unavailable", "model": ErrorResponse},
    },
)
@limit_search
async def search(
    request: Request,
    store_repo: Annotated[IStoreRepository, Depends(get_store_repository)],
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    query: str = Query("", description="Keyword; blank returns no results"),
    case_sensitive: bool = Query(False, alias="caseSensitive"),
    whole_words: bool = Query(False, alias="wholeWords"),
    fuzzy: bool = Query(False, description="Accepted; matching is always exact"),
    sort_by_relevance: bool = Query(False, alias="sortByRelevance"),
):
    """Search every entity; return matched attributes with highlighted matches."""
    search_query = SearchQuery(
        text=query,
        case_sensitive=case_sensitive,
        whole_words=whole_words,
        fuzzy=fuzzy,
        sort_by_relevance=sort_by_relevance,
    )
    max_length = get_settings().max_query_length
    if len(search_query.text) > max_length:
        raise ValidationException(
            f"Query must be at most {max_length} characters", field="query"
        )
    if search_query.is_blank:
        return SearchResponse(results=[], total=0)

    store = await store_repo.get_store()
    items = search_svc.search(store, search_query)
    logger.info(
        "Search %r (case_sensitive=%s, whole_words=%s): %d results",
        search_query.text,
        case_sensitive,
        whole_words,
        len(items),
    )
    return SearchResponse(
        results=[
            SearchResultResponse(
                entity=i.entity,
                info=dict(i.info),
                match_count=i.match_count,
                relevance=i.relevance,
                relevance_label=relevance_label(i.relevance),
            )
            for i in items
        ],
        total=len(items),
    )
