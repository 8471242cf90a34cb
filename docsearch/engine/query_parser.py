"""
Query parser: raw query string -> plus words and minus words.

Query syntax:
    cat city        plus words (documents should contain them)
    cat -garden     minus word (documents containing it are excluded)

Rules:
- A single leading '-' marks a minus word and is stripped
- The remainder must be a valid term ('-' alone, '--cat' and 'cat-' are rejected)
- Stop words are dropped from both sets
- A word may end up in both sets; the sets are not cross-filtered
"""

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, Set

from .errors import InvalidTermError
from .tokenizer import split_into_words
from .validation import validate_word

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryWord:
    """One parsed query token"""
    data: str
    is_minus: bool
    is_stop: bool


@dataclass
class Query:
    """Structured query with deduplicated plus and minus words"""
    plus_words: Set[str] = field(default_factory=set)
    minus_words: Set[str] = field(default_factory=set)


class QueryParser:
    """Parses raw query text against a fixed stop-word set"""

    def __init__(self, stop_words: AbstractSet[str]):
        self.stop_words = stop_words

    def parse_query_word(self, text: str) -> QueryWord:
        """
        Parse a single query token.

        Args:
            text: Non-empty token produced by the tokenizer

        Returns:
            QueryWord with the minus marker stripped

        Raises:
            InvalidTermError: token is '-' alone or the remainder is not a valid term
        """
        if not text:
            raise InvalidTermError(text, "Query word is empty", context="query word")

        is_minus = False
        if text[0] == '-':
            is_minus = True
            text = text[1:]

        check = validate_word(text)
        if not check.is_valid:
            logger.warning(f"Rejected query word {text!r}: {check.reason}")
            raise InvalidTermError(text, check.reason, context="query word")

        return QueryWord(data=text, is_minus=is_minus, is_stop=text in self.stop_words)

    def parse_query(self, text: str) -> Query:
        """
        Parse raw query text.

        Args:
            text: Raw query string

        Returns:
            Query with plus_words and minus_words

        Raises:
            InvalidTermError: any token is invalid (the whole query is rejected)

        Example:
            >>> QueryParser({"in", "the"}).parse_query("cat in -city -city")
            Query(plus_words={'cat'}, minus_words={'city'})
        """
        query = Query()
        for word in split_into_words(text):
            query_word = self.parse_query_word(word)
            if query_word.is_stop:
                continue
            if query_word.is_minus:
                query.minus_words.add(query_word.data)
            else:
                query.plus_words.add(query_word.data)
        return query
