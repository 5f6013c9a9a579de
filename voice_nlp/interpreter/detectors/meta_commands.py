"""Meta-command (UI control) detector."""

from typing import Optional

from .base import BaseDetector
from ..corrector import ErrorCorrector
from ..models import InterpreterConfig, MetaCommandMatch


class MetaCommandDetector(BaseDetector):
    """
    Detects interface commands such as "reset", "scroll up" or "copy that".

    Resolution is first-qualifying-match: commands are tried in the order
    they are declared in the configuration, and phrases in the order they
    are listed. The first phrase that is either contained in the utterance
    or similar enough to the whole utterance wins, even if a later phrase
    would have scored higher.
    """

    def __init__(self, config: InterpreterConfig, corrector: Optional[ErrorCorrector] = None):
        super().__init__(config)
        self.corrector = corrector or ErrorCorrector(config.correction_rules)

    def detect(self, text: str) -> Optional[MetaCommandMatch]:
        corrected = self.corrector.correct(text)
        threshold = self.config.meta_command_threshold

        for command in self.config.meta_commands:
            for phrase in command.phrases:
                # Direct substring match
                if phrase in corrected:
                    return MetaCommandMatch(command.action, 1.0, phrase)

                score = self.similarity(corrected, phrase)
                if score >= threshold:
                    return MetaCommandMatch(command.action, score, phrase)

        return None
