"""Logging setup driven by application settings."""

from __future__ import annotations

import logging

from moviemood.core.config import get_settings


def configure_logging() -> None:
    """Install a root handler at the configured LOG_LEVEL (no-op if one exists)."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
