"""Logging setup for Micro Diary."""

import logging
import os
from typing import Optional


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the process.

    ``MICRODIARY_LOG_LEVEL`` wins over the level passed in.
    """
    level_name = os.getenv("MICRODIARY_LOG_LEVEL", level or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
