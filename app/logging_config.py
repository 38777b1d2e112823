# app/logging_config.py

import logging

from app.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = None) -> None:
    """Configura el logging de la aplicación (stdout, nivel desde LOG_LEVEL)."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    # httpx loguea cada request hecho por supabase/openai
    logging.getLogger("httpx").setLevel(logging.WARNING)
