"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the store repository and the search use
case. Routes depend only on these dependencies, not on infrastructure
directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from loresearch.application.interfaces.repositories import IStoreRepository
from loresearch.application.services.highlighter import Highlighter
from loresearch.application.services.matcher import ExactMatcher
from loresearch.application.services.tree_reducer import TreeReducer
from loresearch.application.use_cases.search import SearchService
from loresearch.core.config import Settings, get_settings
from loresearch.infrastructure.persistence.repositories import JsonStoreRepository


def build_store_repository(settings: Settings) -> JsonStoreRepository:
    """Store repository for the configured JSON document."""
    return JsonStoreRepository(
        settings.store_path,
        reload_on_request=settings.store_reload_on_request,
    )


def get_store_repository(request: Request) -> IStoreRepository:
    """Store repository created once per app in create_app()."""
    return request.app.state.store_repo


def get_search_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> SearchService:
    """Search use case with the configured highlight markers."""
    highlighter = Highlighter(
        settings.highlight_start_marker,
        settings.highlight_end_marker,
    )
    return SearchService(
        TreeReducer(
            matcher=ExactMatcher(),
            highlighter=highlighter,
            max_depth=settings.max_attribute_depth,
        )
    )
