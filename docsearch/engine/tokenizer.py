"""
Tokenizer for document and query text.

Splitting is done on the space character only:
- No lowercasing
- No punctuation stripping
- No stemming
- Tabs, newlines and other control characters stay inside words
  (they are rejected later by term validation)
"""

from typing import List


def split_into_words(text: str) -> List[str]:
    """
    Split text into space-delimited words.

    Args:
        text: Raw document or query text

    Returns:
        Non-empty words in left-to-right order

    Examples:
        >>> split_into_words("cat in the city")
        ['cat', 'in', 'the', 'city']

        >>> split_into_words("  big   dog ")
        ['big', 'dog']

        >>> split_into_words("")
        []
    """
    if not text:
        return []

    # str.split(' ') keeps empty pieces between repeated spaces
    return [word for word in text.split(' ') if word]
