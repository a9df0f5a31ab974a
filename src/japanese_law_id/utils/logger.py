"""
Package-wide loguru configuration.

Importing this module calls ``logger.remove()`` on the process-wide loguru
logger, so sinks added before ``japanese_law_id`` is imported are dropped.
Applications that configure loguru themselves should add their sinks after
the import.
"""

import os
import sys
from pathlib import Path

from loguru import logger

__all__ = ["logger"]

LOG_LEVEL = os.getenv("JAPANESE_LAW_ID_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("JAPANESE_LAW_ID_LOG_FILE")

# Remove default handler
logger.remove()

# Sink 1: Stdout (Human-readable)
logger.add(
    sys.stderr,
    level=LOG_LEVEL,
    format=(
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    ),
)

# Sink 2: File (JSON, Rotation, Retention), only when a path is configured
if LOG_FILE:
    log_path = Path(LOG_FILE)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path,
        rotation="500 MB",
        retention="10 days",
        serialize=True,
        enqueue=True,
        level=LOG_LEVEL,
    )
