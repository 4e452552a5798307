"""Logging helpers."""

import logging
import sys

from ..config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging once. Output goes to stderr so stdio stays clean."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )
