"""Application lifespan: startup and shutdown.

Single place for startup/shutdown logic (SRP). Used by main.py; no
business logic here. The store repository is created in create_app() so
requests work even when the ASGI server skips lifespan events (tests).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from loresearch.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup configuration, yield, then drop the cached store snapshot."""
    settings = get_settings()

    # ---- Startup ----
    logger.info(
        "%s %s started; store document: %s (reload on request: %s)",
        settings.app_name,
        settings.app_version,
        settings.store_path,
        settings.store_reload_on_request,
    )

    yield

    # ---- Shutdown ----
    store_repo = getattr(app.state, "store_repo", None)
    if store_repo is not None:
        store_repo.invalidate()
        logger.info("Store snapshot released")
