"""
Logging setup for the API process.
"""
import logging

from app.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging once at startup."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    # motor/pymongo heartbeat chatter
    logging.getLogger("pymongo").setLevel(logging.WARNING)
