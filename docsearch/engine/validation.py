"""
Term validation.

A valid term:
1. Is not empty
2. Does not start or end with '-'
3. Contains no control characters (codepoint below space)

Validation itself never raises - it returns a TermCheck that callers
turn into InvalidTermError at the API boundary.
"""

from dataclasses import dataclass
from typing import Iterable, Set


@dataclass(frozen=True)
class TermCheck:
    """Outcome of validating one word"""
    word: str
    is_valid: bool
    reason: str = ""    # Empty when the word is valid

    def __bool__(self) -> bool:
        return self.is_valid


def validate_word(word: str) -> TermCheck:
    """
    Check a word against the term-validity rule.

    Args:
        word: Candidate term

    Returns:
        TermCheck with is_valid flag and a human readable reason

    Examples:
        >>> validate_word("cat").is_valid
        True
        >>> validate_word("-cat").reason
        'starts with "-"'
    """
    if not word:
        return TermCheck(word, False, "is empty")
    if word[0] == '-':
        return TermCheck(word, False, 'starts with "-"')
    if word[-1] == '-':
        return TermCheck(word, False, 'ends with "-"')
    if any(ord(c) < ord(' ') for c in word):
        return TermCheck(word, False, "contains control characters")
    return TermCheck(word, True)


def is_valid_word(word: str) -> bool:
    """Shortcut for validate_word(word).is_valid"""
    return validate_word(word).is_valid


def make_unique_non_empty_strings(strings: Iterable[str]) -> Set[str]:
    """Deduplicate strings and drop empty ones"""
    return {s for s in strings if s}
