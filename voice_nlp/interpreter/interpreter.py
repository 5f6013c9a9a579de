"""
Main utterance interpreter.

Coordinates the corrector, both detectors and the path extractor and
turns their output into exactly one InterpretationResult.
"""

from typing import List, Optional, Sequence

from ..utils import log, truncate_text
from .constants import REPHRASE_SUGGESTIONS
from .corrector import ErrorCorrector
from .detectors import IntentClassifier, MetaCommandDetector
from .extractors import extract_file_paths
from .models import (
    Conversation,
    Empty,
    IntentMatch,
    InterpretationResult,
    InterpreterConfig,
    MetaCommand,
    Task,
)


class UtteranceInterpreter:
    """
    Classifies transcribed speech before it reaches the conversational agent.

    Build one instance at startup and share it: it holds no mutable state,
    so concurrent calls need no locking.
    """

    def __init__(self, config: Optional[InterpreterConfig] = None):
        """Initialize the interpreter with the given (or default) configuration."""
        self.config = config or InterpreterConfig.default()
        self.corrector = ErrorCorrector(self.config.correction_rules)
        self.meta_detector = MetaCommandDetector(self.config, self.corrector)
        self.intent_classifier = IntentClassifier(self.config)

    def interpret(self, text: str) -> InterpretationResult:
        """
        Main entry point for interpretation.

        Single pass: empty check, meta-command check, then correction,
        intent classification and path extraction.

        Args:
            text: Raw utterance from speech-to-text

        Returns:
            Empty, MetaCommand, Task or Conversation
        """
        if not text or not text.strip():
            return Empty()

        meta = self.meta_detector.detect(text)
        if meta:
            log.debug(f"[INTERPRETER] Meta-command '{meta.action}' via '{meta.phrase}' "
                      f"({meta.confidence:.2f})")
            return MetaCommand(
                action=meta.action,
                confidence=meta.confidence,
                original_text=text
            )

        corrected = self.corrector.correct(text)
        intent = self.intent_classifier.classify(corrected)
        file_paths = tuple(extract_file_paths(text))

        if intent and intent.confidence >= self.config.task_confidence_threshold:
            log.debug(f"[INTERPRETER] Task {intent!r} for '{truncate_text(corrected)}'")
            return Task(
                original_text=text,
                corrected_text=corrected,
                intent=intent.intent,
                confidence=intent.confidence,
                file_paths=file_paths,
                enhanced_prompt=self.build_enhanced_prompt(corrected, intent, file_paths)
            )

        log.debug(f"[INTERPRETER] Conversation: '{truncate_text(corrected)}'")
        return Conversation(
            original_text=text,
            corrected_text=corrected,
            file_paths=file_paths,
            enhanced_prompt=corrected
        )

    def correct(self, text: str) -> str:
        return self.corrector.correct(text)

    def classify(self, text: str) -> Optional[IntentMatch]:
        """Correct then classify, without the meta-command check."""
        return self.intent_classifier.classify(self.corrector.correct(text))

    def build_enhanced_prompt(
        self,
        text: str,
        intent: Optional[IntentMatch],
        file_paths: Sequence[str]
    ) -> str:
        """Append the inferred intent and any detected paths to the prompt."""
        prompt = text

        if intent:
            context = self.get_intent_context(intent.intent)
            prompt = f"{text}\n\n[Context: User likely wants to {context}]"

        if file_paths:
            prompt += f"\n[Detected file paths: {', '.join(file_paths)}]"

        return prompt

    def get_intent_context(self, intent_name: str) -> str:
        """Human-readable description of an intent, falling back to its name."""
        definition = self.config.get_intent(intent_name)
        if definition and definition.description:
            return definition.description
        return intent_name.replace('_', ' ')

    def get_suggestions(self, text: str) -> List[str]:
        """
        Rephrase prompts for input that could not be classified.

        Returns an empty list when the utterance maps to an intent with
        at least the global task confidence.
        """
        intent = self.classify(text)

        if not intent or intent.confidence < self.config.task_confidence_threshold:
            return list(REPHRASE_SUGGESTIONS)

        return []
