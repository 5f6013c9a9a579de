"""
Base detector class and interfaces.

Both detectors share the same configuration object and expose a single
``detect`` method, so the interpreter can treat them uniformly.
"""

from typing import Any
from abc import ABC, abstractmethod

from ..models import InterpreterConfig
from ..utils import similarity


class BaseDetector(ABC):
    """
    Base class for utterance detectors.

    Detectors are stateless after construction: they only read the
    immutable InterpreterConfig they were built with.
    """

    def __init__(self, config: InterpreterConfig):
        self.config = config

    @abstractmethod
    def detect(self, text: str) -> Any:
        """
        Inspect an utterance.

        Args:
            text: Utterance to inspect (already corrected where the
                detector requires it)

        Returns:
            A match record, or None when nothing qualifies
        """
        raise NotImplementedError

    @staticmethod
    def similarity(a: str, b: str) -> float:
        return similarity(a, b)
