"""
Voice NLP Configuration
=======================
Central configuration for the interpreter, read from environment variables.
"""

import os
from typing import Optional


def _env_float(name: str, default: Optional[float] = None) -> Optional[float]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Threshold overrides (None = use the defaults in interpreter.constants)
WORD_SIMILARITY_THRESHOLD = _env_float("VOICE_NLP_WORD_THRESHOLD")
META_COMMAND_THRESHOLD = _env_float("VOICE_NLP_META_THRESHOLD")
TASK_CONFIDENCE_THRESHOLD = _env_float("VOICE_NLP_TASK_THRESHOLD")


def load_config():
    """
    Build the interpreter configuration from the default tables plus any
    threshold overrides found in the environment.

    Returns:
        InterpreterConfig ready to hand to UtteranceInterpreter
    """
    from .interpreter.models import InterpreterConfig

    overrides = {}
    if WORD_SIMILARITY_THRESHOLD is not None:
        overrides['word_similarity_threshold'] = WORD_SIMILARITY_THRESHOLD
    if META_COMMAND_THRESHOLD is not None:
        overrides['meta_command_threshold'] = META_COMMAND_THRESHOLD
    if TASK_CONFIDENCE_THRESHOLD is not None:
        overrides['task_confidence_threshold'] = TASK_CONFIDENCE_THRESHOLD

    return InterpreterConfig.default(**overrides)
