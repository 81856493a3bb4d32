"""Repository interfaces (ports) for the application layer.

Protocols define contracts for infrastructure implementations (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from loresearch.domain.entities import Store


class IStoreRepository(Protocol):
    """Protocol for supplying a consistent snapshot of the record store."""

    async def get_store(self) -> Store:
        """Return a store snapshot; raise a StoreException if it cannot be loaded."""

    def invalidate(self) -> None:
        """Drop any cached snapshot so the next get_store() reloads."""
