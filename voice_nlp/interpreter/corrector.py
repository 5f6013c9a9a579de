"""
Speech-to-text error correction.

Normalizes an utterance and fixes phrases that transcription commonly
gets wrong ("exit cute" -> "execute", "in stall" -> "install").
"""

import re
from typing import Iterable, List, Tuple

from .models import CorrectionRule
from .utils import normalize_whitespace


class ErrorCorrector:
    """
    Applies an ordered list of phrase substitutions.

    Every rule runs exactly once, in declared order, over the whole text,
    and earlier rules are never re-run on later output. No replacement in
    the default table produces a pattern of the table, so correcting an
    already corrected string leaves it unchanged.
    """

    def __init__(self, rules: Iterable[CorrectionRule]):
        self.rules: Tuple[CorrectionRule, ...] = tuple(rules)
        self._compiled: List[Tuple[re.Pattern, str]] = [
            (self._compile(rule.pattern), rule.replacement)
            for rule in self.rules
        ]

    @staticmethod
    def _compile(phrase: str) -> re.Pattern:
        # Whole words only: "the lead" must not fire inside "the leader"
        return re.compile(r'(?<!\w)' + re.escape(phrase) + r'(?!\w)', re.IGNORECASE)

    def correct(self, text: str) -> str:
        """
        Lowercase, trim, collapse whitespace, then apply every rule once.

        Examples:
            >>> ErrorCorrector([CorrectionRule('exit cute', 'execute')]).correct("  Exit  Cute npm ")
            'execute npm'
        """
        corrected = normalize_whitespace(text.lower())
        for pattern, replacement in self._compiled:
            corrected = pattern.sub(lambda _m, r=replacement: r, corrected)
        return corrected
