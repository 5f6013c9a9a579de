"""
Integration layer for callers that don't manage their own interpreter.

Provides a lazily created default instance and small convenience
wrappers around it.
"""

from typing import Optional

from ..utils import log, format_confidence
from .interpreter import UtteranceInterpreter
from .models import InterpretationResult, MetaCommand, Task


# Singleton instance for convenience
_default_interpreter = None


def get_default_interpreter() -> UtteranceInterpreter:
    """
    Get the default global interpreter instance.

    Built on first use from voice_nlp.config.load_config(), so threshold
    overrides in the environment are honored.

    Returns:
        Singleton UtteranceInterpreter instance
    """
    global _default_interpreter
    if _default_interpreter is None:
        from ..config import load_config
        _default_interpreter = UtteranceInterpreter(load_config())
    return _default_interpreter


def interpret_text(
    text: str,
    interpreter: Optional[UtteranceInterpreter] = None
) -> InterpretationResult:
    """
    Interpret an utterance and log what was decided.

    Args:
        text: Raw utterance
        interpreter: Instance to use (the default one if None)

    Returns:
        InterpretationResult from UtteranceInterpreter.interpret()

    Example:
        >>> result = interpret_text("red the file server.js")
        >>> result.intent
        'file_read'
    """
    if interpreter is None:
        interpreter = get_default_interpreter()

    result = interpreter.interpret(text)

    if isinstance(result, MetaCommand):
        log.info(f"[INTERPRETER] Meta-command: {result.action}")
        log.info(f"[INTERPRETER] Confidence: {format_confidence(result.confidence)}")
    elif isinstance(result, Task):
        log.info(f"[INTERPRETER] Task: {result.intent}")
        log.info(f"[INTERPRETER] Confidence: {format_confidence(result.confidence)}")
        if result.file_paths:
            log.info(f"[INTERPRETER] File paths: {', '.join(result.file_paths)}")

    return result


def classify_simple(text: str) -> Optional[str]:
    """
    Simplified interface that just returns a label.

    Returns:
        The meta-command action, the task intent name, or None for
        conversation and empty input

    Example:
        >>> classify_simple("scroll down")
        'scroll_down'
    """
    result = get_default_interpreter().interpret(text)

    if isinstance(result, MetaCommand):
        return result.action
    if isinstance(result, Task):
        return result.intent

    return None
