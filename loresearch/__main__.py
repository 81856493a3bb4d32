"""Run the search server: python -m loresearch."""

import uvicorn

from loresearch.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "loresearch.main:app",
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
