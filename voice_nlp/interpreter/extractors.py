"""
Parameter extraction functions.

Pulls file paths and file names out of the raw (uncorrected) utterance,
so path casing and punctuation survive intact.
"""

import re
from typing import List, Tuple

# /usr/local/bin/app ; not when the slash continues another token (./x, a/b)
ABSOLUTE_PATH_PATTERN = re.compile(r'(?<![\w./\-~])(?:/[^\s/]+)+')

# ./config.json ../lib/util.py
RELATIVE_PATH_PATTERN = re.compile(r'(?<![\w.])\.{1,2}/[\w\-./]+')

# server.js package.json (extension must start with a letter, so 3.14 is skipped)
FILE_NAME_PATTERN = re.compile(r'\b[\w\-]+\.[A-Za-z]\w*\b')

PATH_PATTERNS = [ABSOLUTE_PATH_PATTERN, RELATIVE_PATH_PATTERN, FILE_NAME_PATTERN]

# Sentence punctuation that sticks to the end of a spoken path
_TRAILING_PUNCTUATION = '.,;:!?\'")]}'

# Path segments made only of dots, never trimmed
_DOT_SEGMENTS = ('.', '..')


def _trim_trailing_punctuation(path: str) -> str:
    """
    Drop sentence punctuation glued to the end of a path.

    At most one '.' is removed (the full stop), and none when the path
    ends in a '.' or '..' segment, so "cd ../.." keeps its parent hops.
    """
    dot_removed = False
    while path and path[-1] in _TRAILING_PUNCTUATION:
        if path[-1] == '.':
            if dot_removed or path.rsplit('/', 1)[-1] in _DOT_SEGMENTS:
                break
            dot_removed = True
        path = path[:-1]
    return path


def extract_file_paths(text: str) -> List[str]:
    """
    Extract file paths and file names from text.

    Three independent pattern families are applied (absolute paths,
    relative paths, bare file names). Matches are returned in the order
    they appear in the text, each distinct string once.

    Args:
        text: Original utterance

    Returns:
        List of paths, first occurrence first

    Examples:
        >>> extract_file_paths("open /usr/local/bin/app and ./config.json")
        ['/usr/local/bin/app', './config.json', 'config.json']
    """
    if not text:
        return []

    found: List[Tuple[int, int, str]] = []
    for family, pattern in enumerate(PATH_PATTERNS):
        for match in pattern.finditer(text):
            path = _trim_trailing_punctuation(match.group(0))
            if path and path not in _DOT_SEGMENTS + ('/',):
                found.append((match.start(), family, path))

    found.sort(key=lambda item: (item[0], item[1]))

    paths: List[str] = []
    seen = set()
    for _, _, path in found:
        if path not in seen:
            seen.add(path)
            paths.append(path)

    return paths
