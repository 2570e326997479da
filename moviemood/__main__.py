"""Run the API with uvicorn on the configured PORT."""

from __future__ import annotations

import logging

import uvicorn

from moviemood.core.config import get_settings
from moviemood.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging()
    settings = get_settings()
    logger.info("Server is up and running on port %s...", settings.port)
    uvicorn.run("moviemood.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
