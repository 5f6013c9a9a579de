"""
Voice NLP Utility Functions
===========================
Common utility functions used across the voice_nlp package.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import LOG_LEVEL

# ================================================================================
# LOGGING
# ================================================================================

def setup_logger(name: str = "voice_nlp", level: str = "INFO") -> logging.Logger:
    """Set up and return a logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(asctime)s - %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger


log = setup_logger(level=LOG_LEVEL)


# ================================================================================
# STRING UTILITIES
# ================================================================================

def truncate_text(text: str, max_length: int = 60, suffix: str = "...") -> str:
    """Truncate text for log lines."""
    if not text or len(text) <= max_length:
        return text or ""
    return text[:max_length - len(suffix)] + suffix


def format_confidence(confidence: Optional[float]) -> str:
    """Render a confidence score as a percentage string."""
    if confidence is None:
        return "n/a"
    return f"{confidence * 100:.1f}%"
