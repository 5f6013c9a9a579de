"""Task intent classifier."""

from typing import List, Optional, Tuple

from .base import BaseDetector
from ..constants import SUBSTRING_SCORE
from ..models import IntentDefinition, IntentMatch
from ..utils import split_words


class IntentClassifier(BaseDetector):
    """
    Scores a corrected utterance against every configured task intent.

    For each intent, every word is fuzzy-matched against every keyword and
    object, and every keyword/object found verbatim in the text adds a flat
    bonus. Both signals can fire for the same term. The score is divided by
    the size of the intent's vocabulary, not by the length of the utterance.
    """

    def detect(self, text: str) -> Optional[IntentMatch]:
        return self.classify(text)

    def classify(self, corrected_text: str) -> Optional[IntentMatch]:
        """
        Pick the intent for an already corrected utterance.

        An intent qualifies with at least one keyword hit and a ratio at or
        above its own floor. The first qualifying intent that strictly beats
        the running best wins, so on exact ties the earlier-declared intent
        is kept.

        Args:
            corrected_text: Output of ErrorCorrector.correct()

        Returns:
            IntentMatch with confidence clamped to [0, 1], or None
        """
        words = split_words(corrected_text)

        best: Optional[IntentMatch] = None
        best_ratio = 0.0

        for intent in self.config.intents:
            ratio, keyword_matches, object_matches = self._score_intent(
                intent, corrected_text, words
            )
            if keyword_matches == 0:
                continue
            if ratio >= intent.confidence and ratio > best_ratio:
                best_ratio = ratio
                best = IntentMatch(
                    intent=intent.name,
                    confidence=min(ratio, 1.0),
                    keyword_matches=keyword_matches,
                    object_matches=object_matches,
                )

        return best

    def score(self, intent: IntentDefinition, corrected_text: str) -> float:
        """Raw (unclamped) ratio of one intent against an utterance."""
        ratio, _, _ = self._score_intent(intent, corrected_text, split_words(corrected_text))
        return ratio

    def _score_intent(
        self,
        intent: IntentDefinition,
        text: str,
        words: List[str]
    ) -> Tuple[float, int, int]:
        keyword_score, keyword_matches = self._score_terms(intent.keywords, text, words)
        object_score, object_matches = self._score_terms(intent.objects, text, words)

        score = keyword_score + object_score * self.config.object_weight
        return score / intent.vocabulary_size, keyword_matches, object_matches

    def _score_terms(self, terms: Tuple[str, ...], text: str, words: List[str]) -> Tuple[float, int]:
        threshold = self.config.word_similarity_threshold
        score = 0.0
        matches = 0

        for term in terms:
            for word in words:
                sim = self.similarity(word, term)
                if sim >= threshold:
                    score += sim
                    matches += 1

            if term in text:
                score += SUBSTRING_SCORE
                matches += 1

        return score, matches
