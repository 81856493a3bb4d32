"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; validate_store_and_markers rejects values
    that would make every search fail (empty store path, empty markers).
    """

    # App
    app_name: str = "loresearch"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server (python -m loresearch)
    host: str = "127.0.0.1"
    port: int = 3000

    # Store: JSON document mapping entity name -> attribute object
    store_path: str = "store.json"
    # Re-read the document on every search (edits visible immediately); False caches the first load.
    store_reload_on_request: bool = True

    # Search
    highlight_start_marker: str = "<mark>"
    highlight_end_marker: str = "</mark>"
    max_query_length: int = 500
    max_attribute_depth: int = 100

    # CORS
    allowed_origins: str = "*"

    # Request / middleware
    request_timeout_seconds: int = 30
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_store_and_markers(self) -> "Settings":
        """Validate store path, highlight markers and limits."""
        if not self.store_path.strip():
            raise ValueError(
                "STORE_PATH is required. Set it to the JSON store document "
                "in environment or .env file."
            )
        if not self.highlight_start_marker or not self.highlight_end_marker:
            raise ValueError(
                "HIGHLIGHT_START_MARKER and HIGHLIGHT_END_MARKER must be non-empty."
            )
        if self.max_query_length < 1:
            raise ValueError(
                f"max_query_length must be at least 1, got: {self.max_query_length}"
            )
        if self.max_attribute_depth < 1:
            raise ValueError(
                f"max_attribute_depth must be at least 1, got: {self.max_attribute_depth}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
