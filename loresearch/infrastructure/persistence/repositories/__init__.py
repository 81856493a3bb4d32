"""Persistence repositories. Re-exports for dependency injection."""

from loresearch.infrastructure.persistence.repositories.store_repo import (
    JsonStoreRepository,
)

__all__ = ["JsonStoreRepository"]
