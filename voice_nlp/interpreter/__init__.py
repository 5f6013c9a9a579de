"""
Voice NLP Utterance Interpreter
===============================

Classifies short, noisy speech-to-text utterances before they reach the
conversational agent.

Package Structure:
    models.py           - Configuration records and result variants
    constants.py        - Thresholds and default phrase tables
    utils.py            - Edit distance and similarity
    corrector.py        - Transcription error correction
    detectors/          - Utterance detectors
        meta_commands.py - UI control commands (reset, scroll, copy...)
        intents.py       - Task intent classification
    extractors.py       - File path extraction
    interpreter.py      - Main orchestrator class
    integration.py      - Default instance and convenience wrappers
"""

from .models import (
    CorrectionRule,
    MetaCommandDefinition,
    IntentDefinition,
    InterpreterConfig,
    MetaCommandMatch,
    IntentMatch,
    Empty,
    MetaCommand,
    Task,
    Conversation,
    InterpretationResult,
)
from .constants import ConfidenceThreshold
from .utils import levenshtein_distance, similarity
from .corrector import ErrorCorrector
from .extractors import extract_file_paths
from .interpreter import UtteranceInterpreter
from .integration import get_default_interpreter, interpret_text, classify_simple

__all__ = [
    # Configuration
    'CorrectionRule',
    'MetaCommandDefinition',
    'IntentDefinition',
    'InterpreterConfig',
    'ConfidenceThreshold',

    # Results
    'MetaCommandMatch',
    'IntentMatch',
    'Empty',
    'MetaCommand',
    'Task',
    'Conversation',
    'InterpretationResult',

    # Building blocks
    'levenshtein_distance',
    'similarity',
    'ErrorCorrector',
    'extract_file_paths',

    # Main interpreter
    'UtteranceInterpreter',

    # Integration
    'get_default_interpreter',
    'interpret_text',
    'classify_simple',
]
