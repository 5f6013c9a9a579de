"""
Utility functions for utterance interpretation.

Provides edit distance, normalized similarity and whitespace helpers.
"""

from typing import List


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Classic unit-cost edit distance (insertions, deletions, substitutions).

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("", "abc")
        3
    """
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)
    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            # Cost of insertions, deletions, or substitutions
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def similarity(s1: str, s2: str) -> float:
    """
    Normalized similarity between two strings.

    Computed as ``1 - distance / max(len(s1), len(s2))``. Two empty
    strings are identical (1.0); identical strings of any length score
    exactly 1.0.

    Args:
        s1: First string
        s2: Second string

    Returns:
        Similarity score between 0.0 and 1.0

    Examples:
        >>> similarity("red", "read")
        0.75
        >>> similarity("", "abc")
        0.0
    """
    if s1 == s2:
        return 1.0

    max_len = max(len(s1), len(s2))
    return 1.0 - (levenshtein_distance(s1, s2) / max_len)


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace to single spaces and trim the ends."""
    return ' '.join(text.split())


def split_words(text: str) -> List[str]:
    """Split text into whitespace-delimited word tokens."""
    return text.split()
