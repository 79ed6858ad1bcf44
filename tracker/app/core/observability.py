"""
Logging setup for the Parcel Tracker.

Store operations log through the package logger with structured
context passed via ``extra``.
"""

import logging
from typing import Any, Dict, Optional

from tracker.app.core.config import settings

# Configure structured logger
logger = logging.getLogger("tracker")

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.
    
    Calling it again only updates the level.
    
    Args:
        level: Log level name, defaults to settings.log_level
        
    Returns:
        The package logger
    """
    logger.setLevel((level or settings.log_level).upper())
    
    if not any(getattr(h, "_tracker_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._tracker_handler = True
        logger.addHandler(handler)
    
    return logger


def log_context(**fields: Any) -> Dict[str, Any]:
    """Build the ``extra`` payload for a log record."""
    return {"app_name": settings.app_name, **fields}
