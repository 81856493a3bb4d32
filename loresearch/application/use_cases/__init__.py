"""Application use cases (orchestration over application services)."""

from loresearch.application.use_cases.search import SearchService

__all__ = ["SearchService"]
