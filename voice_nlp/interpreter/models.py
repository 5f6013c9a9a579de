"""
Data models for utterance interpretation.

Defines the immutable configuration records, the intermediate match
records produced by the detectors, and the four result variants.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict, replace
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from .utils import normalize_whitespace


def _check_unit_interval(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be between 0 and 1, got {value}")


def _normalize_terms(terms) -> Tuple[str, ...]:
    # Same shape as corrected text: lowercase, single spaces, blanks dropped
    normalized = (normalize_whitespace(t.lower()) for t in terms)
    return tuple(t for t in normalized if t)


# ================================================================================
# CONFIGURATION
# ================================================================================

@dataclass(frozen=True)
class CorrectionRule:
    """A phrase substitution applied to the whole utterance."""

    pattern: str
    replacement: str

    def __post_init__(self):
        pattern = normalize_whitespace(self.pattern.lower())
        if not pattern:
            raise ValueError("CorrectionRule pattern must not be empty")
        object.__setattr__(self, 'pattern', pattern)
        object.__setattr__(self, 'replacement', normalize_whitespace(self.replacement.lower()))


@dataclass(frozen=True)
class MetaCommandDefinition:
    """A UI control action and the phrases that trigger it."""

    action: str
    phrases: Tuple[str, ...]

    def __post_init__(self):
        if not self.action:
            raise ValueError("MetaCommandDefinition action must not be empty")
        phrases = _normalize_terms(self.phrases)
        if not phrases:
            raise ValueError(f"Meta-command '{self.action}' needs at least one phrase")
        object.__setattr__(self, 'phrases', phrases)


@dataclass(frozen=True)
class IntentDefinition:
    """A task intent with its keyword/object vocabulary and confidence floor."""

    name: str
    keywords: Tuple[str, ...]
    objects: Tuple[str, ...] = ()
    confidence: float = 0.6  # Per-intent floor
    description: str = ''    # Human-readable, used in enhanced prompts

    def __post_init__(self):
        if not self.name:
            raise ValueError("IntentDefinition name must not be empty")
        keywords = _normalize_terms(self.keywords)
        if not keywords:
            raise ValueError(f"Intent '{self.name}' needs at least one keyword")
        object.__setattr__(self, 'keywords', keywords)
        object.__setattr__(self, 'objects', _normalize_terms(self.objects))
        _check_unit_interval(f"Intent '{self.name}' confidence", self.confidence)

    @property
    def vocabulary_size(self) -> int:
        return len(self.keywords) + len(self.objects)


@dataclass(frozen=True)
class InterpreterConfig:
    """
    Everything the interpreter needs, fixed at construction.

    Tables are stored as tuples so a single instance can be shared
    between threads without copying or locking.
    """

    correction_rules: Tuple[CorrectionRule, ...]
    meta_commands: Tuple[MetaCommandDefinition, ...]
    intents: Tuple[IntentDefinition, ...]
    word_similarity_threshold: float = 0.70
    meta_command_threshold: float = 0.85
    task_confidence_threshold: float = 0.50
    object_weight: float = 0.5

    def __post_init__(self):
        object.__setattr__(self, 'correction_rules', tuple(self.correction_rules))
        object.__setattr__(self, 'meta_commands', tuple(self.meta_commands))
        object.__setattr__(self, 'intents', tuple(self.intents))
        _check_unit_interval('word_similarity_threshold', self.word_similarity_threshold)
        _check_unit_interval('meta_command_threshold', self.meta_command_threshold)
        _check_unit_interval('task_confidence_threshold', self.task_confidence_threshold)
        _check_unit_interval('object_weight', self.object_weight)

    @classmethod
    def default(cls, **overrides: Any) -> InterpreterConfig:
        """
        Build the stock configuration from the tables in constants.py.

        Keyword arguments override individual fields, e.g.
        ``InterpreterConfig.default(meta_command_threshold=0.9)``.
        """
        from .constants import (
            ConfidenceThreshold, CORRECTION_RULES, META_COMMANDS,
            INTENT_PATTERNS, OBJECT_WEIGHT,
        )

        config = cls(
            correction_rules=tuple(
                CorrectionRule(pattern, replacement)
                for pattern, replacement in CORRECTION_RULES
            ),
            meta_commands=tuple(
                MetaCommandDefinition(action, tuple(phrases))
                for action, phrases in META_COMMANDS.items()
            ),
            intents=tuple(
                IntentDefinition(
                    name=name,
                    keywords=tuple(data['keywords']),
                    objects=tuple(data['objects']),
                    confidence=data['confidence'],
                    description=data.get('context', ''),
                )
                for name, data in INTENT_PATTERNS.items()
            ),
            word_similarity_threshold=ConfidenceThreshold.WORD_MATCH,
            meta_command_threshold=ConfidenceThreshold.META_COMMAND,
            task_confidence_threshold=ConfidenceThreshold.TASK,
            object_weight=OBJECT_WEIGHT,
        )
        return replace(config, **overrides) if overrides else config

    def get_intent(self, name: str) -> Optional[IntentDefinition]:
        for intent in self.intents:
            if intent.name == name:
                return intent
        return None


# ================================================================================
# DETECTOR OUTPUT
# ================================================================================

@dataclass(frozen=True)
class MetaCommandMatch:
    """A detected UI control command."""

    action: str
    confidence: float  # 0.0 to 1.0
    phrase: str        # Trigger phrase that matched


@dataclass(frozen=True)
class IntentMatch:
    """The intent selected by the classifier."""

    intent: str
    confidence: float  # 0.0 to 1.0
    keyword_matches: int
    object_matches: int

    def __repr__(self) -> str:
        return (
            f"IntentMatch(intent={self.intent}, "
            f"conf={self.confidence:.2f}, "
            f"keywords={self.keyword_matches}, "
            f"objects={self.object_matches})"
        )


# ================================================================================
# INTERPRETATION RESULTS
# ================================================================================

class _ResultMixin:
    type: ClassVar[str]

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form for JSON serialization downstream."""
        data = asdict(self)
        if 'file_paths' in data:
            data['file_paths'] = list(data['file_paths'])
        return {'type': self.type, **data}


@dataclass(frozen=True)
class Empty(_ResultMixin):
    """Nothing was said."""

    type: ClassVar[str] = 'empty'


@dataclass(frozen=True)
class MetaCommand(_ResultMixin):
    """The utterance controls the interface rather than the agent."""

    type: ClassVar[str] = 'meta_command'

    action: str
    confidence: float
    original_text: str


@dataclass(frozen=True)
class Task(_ResultMixin):
    """The utterance asks for a recognized task."""

    type: ClassVar[str] = 'task'

    original_text: str
    corrected_text: str
    intent: str
    confidence: float
    file_paths: Tuple[str, ...] = field(default_factory=tuple)
    enhanced_prompt: str = ''

    def __repr__(self) -> str:
        return (
            f"Task(intent={self.intent}, "
            f"conf={self.confidence:.2f}, "
            f"paths={len(self.file_paths)} items)"
        )


@dataclass(frozen=True)
class Conversation(_ResultMixin):
    """General conversation; forwarded as-is after correction."""

    type: ClassVar[str] = 'conversation'

    original_text: str
    corrected_text: str
    file_paths: Tuple[str, ...] = field(default_factory=tuple)
    enhanced_prompt: str = ''


InterpretationResult = Union[Empty, MetaCommand, Task, Conversation]
