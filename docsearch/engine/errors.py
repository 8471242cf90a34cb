"""Exceptions raised by the search engine"""


class SearchServerError(Exception):
    """Base class for all search engine errors"""


class InvalidArgumentError(SearchServerError, ValueError):
    """Caller passed an argument the engine cannot accept (bad id, bad text)"""


class InvalidTermError(InvalidArgumentError):
    """A stop word, document word or query word failed term validation"""

    def __init__(self, word: str, reason: str, context: str = "term"):
        self.word = word
        self.reason = reason
        super().__init__(f"Invalid {context} {word!r}: {reason}")


class DocumentIndexOutOfRangeError(SearchServerError, IndexError):
    """Positional document lookup outside [0, document count)"""

    def __init__(self, index: int, document_count: int):
        self.index = index
        self.document_count = document_count
        super().__init__(
            f"Document index {index} is out of range (document count: {document_count})"
        )
