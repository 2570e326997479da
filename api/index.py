import logging

from moviemood.core.logging_config import configure_logging
from moviemood.main import app

# Serverless platforms import this module directly; the lifespan hook may not run.
configure_logging()
logger = logging.getLogger(__name__)

logger.info("api/index.py initialized")

__all__ = ["app"]
