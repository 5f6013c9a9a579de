"""
Utterance detectors.

Each detector answers one question about an utterance: is it a UI
control command, or which task intent does it express.
"""

from .base import BaseDetector
from .meta_commands import MetaCommandDetector
from .intents import IntentClassifier

__all__ = [
    'BaseDetector',
    'MetaCommandDetector',
    'IntentClassifier',
]
