"""
Voice NLP Package
=================
Interprets noisy speech transcriptions: UI meta-commands, task intents
and mentioned file paths.

Usage:
    from voice_nlp import UtteranceInterpreter
    interpreter = UtteranceInterpreter()
    result = interpreter.interpret("red the file server.js")
"""

__version__ = "1.0.0"

from .utils import setup_logger, log

from .interpreter import (
    # Configuration
    CorrectionRule, MetaCommandDefinition, IntentDefinition, InterpreterConfig,
    # Results
    Empty, MetaCommand, Task, Conversation, InterpretationResult,
    # Interpreter
    UtteranceInterpreter, get_default_interpreter, interpret_text, classify_simple,
    # Utilities
    similarity, extract_file_paths,
)

from .config import load_config

__all__ = [
    '__version__',
    # Utils
    'setup_logger', 'log',
    # Config
    'load_config',
    'CorrectionRule', 'MetaCommandDefinition', 'IntentDefinition', 'InterpreterConfig',
    # Results
    'Empty', 'MetaCommand', 'Task', 'Conversation', 'InterpretationResult',
    # Interpreter
    'UtteranceInterpreter', 'get_default_interpreter', 'interpret_text', 'classify_simple',
    'similarity', 'extract_file_paths',
]
