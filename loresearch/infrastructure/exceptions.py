"""Infrastructure exceptions for loading the record store.

Store errors extend LoreSearchException so presentation can map them
to HTTP responses consistently. The search core never raises these; they
come from the loader before a search starts.
"""

from loresearch.domain.exceptions import LoreSearchException


class StoreException(LoreSearchException):
    """Base exception for store loading."""


class StoreNotFoundError(StoreException):
    """Store document does not exist at the configured path."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Store document not found: {path}",
            "STORE_NOT_FOUND",
            {"path": path},
        )


class StoreReadError(StoreException):
    """Store document exists but could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Failed to read store document: {path}",
            "STORE_READ_ERROR",
            {"path": path, "reason": reason},
        )


class StoreFormatError(StoreException):
    """Store document is not valid JSON or not an object of entities."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Malformed store document: {path}",
            "STORE_FORMAT_ERROR",
            {"path": path, "reason": reason},
        )
