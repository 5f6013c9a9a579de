"""
Constants and configuration for utterance interpretation.

Centralizes thresholds and the default phrase tables. Table order is part
of the configuration contract: meta-commands and intents are resolved by
the first qualifying entry, so reordering entries changes results.
"""


class ConfidenceThreshold:
    """
    Similarity and confidence thresholds.

    All values are in [0, 1].
    """
    WORD_MATCH = 0.70         # Word vs keyword/object fuzzy match
    META_COMMAND = 0.85       # Whole utterance vs trigger phrase
    TASK = 0.50               # Global floor on top of per-intent floors
    INTENT_DEFAULT = 0.60     # Default per-intent floor
    INTENT_PRECISE = 0.70     # Floor for destructive / side-effecting intents


# Scoring weights for the intent classifier
SUBSTRING_SCORE = 1.0   # Keyword found verbatim in the utterance
OBJECT_WEIGHT = 0.5     # Objects count half as much as keywords


# Phrase corrections for common speech-to-text errors.
# Applied once, in order, on whole-word boundaries.
CORRECTION_RULES = [
    ('exit cute', 'execute'),
    ('in stall', 'install'),
    ('term null', 'terminal'),
    ('d lead', 'delete'),
    ('the lead', 'delete'),
    ('file path', 'filepath'),
    # Homophones, only where the following word disambiguates them
    ('red the', 'read the'),
    ('right a', 'write a'),
    ('so me', 'show me'),
    ('fine the', 'find the'),
    ('one the', 'run the'),
    ('coffee that', 'copy that'),
    ('missed the', 'list the'),
]


# UI control commands, checked before anything else.
# Bare 'top' / 'bottom' are left out: they fire inside 'stop', 'laptop', etc.
META_COMMANDS = {
    'reset': ['reset', 'clear', 'start over', 'new conversation', 'restart'],
    'save': ['save chat', 'export chat', 'download chat', 'save conversation'],
    'scroll_up': ['scroll up', 'go up', 'move up'],
    'scroll_down': ['scroll down', 'go down', 'move down'],
    'scroll_top': ['scroll to top', 'go to top'],
    'scroll_bottom': ['scroll to bottom', 'go to bottom'],
    'copy': ['copy response', 'copy message', 'copy last', 'copy that'],
    'help': ['help', 'what can you do', 'show help', 'commands'],
}


# Task intents. Confidence is normalized by len(keywords) + len(objects),
# so the tables are kept short and specific.
INTENT_PATTERNS = {
    'file_read': {
        'keywords': ['read', 'show', 'view'],
        'objects': ['file'],
        'confidence': ConfidenceThreshold.INTENT_DEFAULT,
        'context': 'read/view a file',
    },
    'file_write': {
        'keywords': ['write', 'create', 'edit'],
        'objects': ['file'],
        'confidence': ConfidenceThreshold.INTENT_DEFAULT,
        'context': 'create or edit a file',
    },
    'file_delete': {
        'keywords': ['delete', 'remove'],
        'objects': ['file', 'folder'],
        'confidence': ConfidenceThreshold.INTENT_PRECISE,
        'context': 'delete a file or folder',
    },
    'file_list': {
        'keywords': ['list', 'show'],
        'objects': ['files', 'folder', 'directory'],
        'confidence': ConfidenceThreshold.INTENT_DEFAULT,
        'context': 'list files in a directory',
    },
    'execute_command': {
        'keywords': ['run', 'execute', 'launch'],
        'objects': ['command', 'script'],
        'confidence': ConfidenceThreshold.INTENT_DEFAULT,
        'context': 'run a command or script',
    },
    'search': {
        'keywords': ['find', 'search', 'grep'],
        'objects': ['file', 'text', 'code'],
        'confidence': ConfidenceThreshold.INTENT_DEFAULT,
        'context': 'find or search for something',
    },
    'install': {
        'keywords': ['install', 'download'],
        'objects': ['package', 'library'],
        'confidence': ConfidenceThreshold.INTENT_PRECISE,
        'context': 'install a package or dependency',
    },
}


# Offered when an utterance cannot be classified
REPHRASE_SUGGESTIONS = [
    "Could you rephrase that?",
    "I'm not sure what you want me to do. Try being more specific.",
    "Did you want me to read, write, list, or execute something?",
]
