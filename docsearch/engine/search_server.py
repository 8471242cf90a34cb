"""
In-memory document index with TF-IDF search.

Pipeline:
    add_document:        tokenize -> drop stop words -> validate -> update inverted index
    find_top_documents:  parse query -> score (Ranker) -> sort and trim
    match_document:      parse query -> list plus words present in one document

Not thread-safe. add_document is the only mutator; if the index is shared
between threads, guard add_document with the write side of a readers-writer
lock and the query paths with the read side.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..utils import log_duration
from .document import Document, DocumentData, DocumentStatus, compute_average_rating
from .errors import DocumentIndexOutOfRangeError, InvalidArgumentError, InvalidTermError
from .query_parser import QueryParser
from .ranker import DocumentPredicate, Ranker
from .tokenizer import split_into_words
from .validation import make_unique_non_empty_strings, validate_word

logger = logging.getLogger(__name__)

StopWords = Union[str, Iterable[str], None]
PredicateOrStatus = Union[DocumentPredicate, DocumentStatus, None]


class SearchServer:
    """
    Document index answering ranked keyword queries.

    Example:
        >>> server = SearchServer("in the")
        >>> server.add_document(0, "cat in the city", DocumentStatus.ACTUAL, [1, 2, 3])
        >>> server.add_document(1, "cat in the garden", DocumentStatus.ACTUAL, [1, 2, 3])
        >>> [doc.id for doc in server.find_top_documents("cat -city")]
        [1]
    """

    def __init__(self, stop_words: StopWords = None, ranker: Optional[Ranker] = None):
        """
        Initialize an empty index.

        Args:
            stop_words: Space-separated string or iterable of stop words.
                Empty strings are dropped, duplicates merged.
            ranker: Ranking policy (default: top 5, epsilon 1e-6)

        Raises:
            InvalidTermError: a stop word is not a valid term
        """
        if stop_words is None:
            stop_words = ()
        elif isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)

        unique_stop_words = make_unique_non_empty_strings(stop_words)
        for word in sorted(unique_stop_words):
            check = validate_word(word)
            if not check.is_valid:
                logger.warning(f"Rejected stop word {word!r}: {check.reason}")
                raise InvalidTermError(word, check.reason, context="stop word")

        self._stop_words = frozenset(unique_stop_words)
        self._word_to_document_freqs: Dict[str, Dict[int, float]] = {}
        self._documents: Dict[int, DocumentData] = {}
        self._document_ids: List[int] = []
        self._ranker = ranker or Ranker()
        self._query_parser = QueryParser(self._stop_words)

        logger.debug(f"SearchServer created with {len(self._stop_words)} stop words")

    @property
    def stop_words(self) -> frozenset:
        return self._stop_words

    @property
    def ranker(self) -> Ranker:
        return self._ranker

    def is_stop_word(self, word: str) -> bool:
        return word in self._stop_words

    def split_into_words_no_stop(self, text: str) -> List[str]:
        """Tokenize text and drop stop words (no validation)"""
        return [word for word in split_into_words(text) if not self.is_stop_word(word)]

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Sequence[int],
    ) -> None:
        """
        Index a document.

        The call is all-or-nothing: if any check fails, the index is unchanged.

        Args:
            document_id: Non-negative id, unique within the index
            document: Document text
            status: Document status used by query predicates
            ratings: Per-document scores, averaged (truncated toward zero)

        Raises:
            InvalidArgumentError: negative or duplicate id
            InvalidTermError: a non-stop word in the text is invalid
        """
        if document_id < 0:
            logger.warning(f"Rejected document with negative id {document_id}")
            raise InvalidArgumentError(f"Document id is negative: {document_id}")
        if document_id in self._documents:
            logger.warning(f"Rejected duplicate document id {document_id}")
            raise InvalidArgumentError(f"Search server already contains document with id {document_id}")

        words = self.split_into_words_no_stop(document)
        for word in words:
            check = validate_word(word)
            if not check.is_valid:
                logger.warning(f"Rejected document {document_id}: word {word!r} {check.reason}")
                raise InvalidTermError(word, check.reason, context="document word")

        # Validation passed - mutate
        if words:
            inv_word_count = 1.0 / len(words)
            for word in words:
                postings = self._word_to_document_freqs.setdefault(word, {})
                postings[document_id] = postings.get(document_id, 0.0) + inv_word_count

        self._documents[document_id] = DocumentData(
            rating=compute_average_rating(ratings),
            status=status,
        )
        self._document_ids.append(document_id)

        logger.debug(f"Added document {document_id}: {len(words)} words, status={status}")

    def get_document_count(self) -> int:
        return len(self._documents)

    def __len__(self) -> int:
        return self.get_document_count()

    def __iter__(self) -> Iterator[int]:
        """Iterate document ids in insertion order"""
        return iter(self._document_ids)

    def get_document_id(self, index: int) -> int:
        """
        Document id at an insertion position.

        Raises:
            DocumentIndexOutOfRangeError: index < 0 or index >= document count
        """
        if index < 0 or index >= len(self._document_ids):
            raise DocumentIndexOutOfRangeError(index, len(self._document_ids))
        return self._document_ids[index]

    @staticmethod
    def _make_predicate(predicate_or_status: PredicateOrStatus) -> DocumentPredicate:
        if predicate_or_status is None:
            predicate_or_status = DocumentStatus.ACTUAL

        if isinstance(predicate_or_status, DocumentStatus):
            expected_status = predicate_or_status
            return lambda document_id, status, rating: status == expected_status

        if not callable(predicate_or_status):
            raise InvalidArgumentError(
                f"Expected DocumentStatus or predicate, got {type(predicate_or_status).__name__}"
            )
        return predicate_or_status

    def find_top_documents(self, raw_query: str, predicate_or_status: PredicateOrStatus = None) -> List[Document]:
        """
        Search the index.

        Args:
            raw_query: Query text ("cat -city")
            predicate_or_status: One of
                - callable (document_id, status, rating) -> bool
                - DocumentStatus (keep documents with that status)
                - None (keep ACTUAL documents)

        Returns:
            Best documents first, at most Ranker.max_result_count

        Raises:
            InvalidTermError: query contains an invalid word
        """
        predicate = self._make_predicate(predicate_or_status)

        with log_duration(f"find_top_documents({raw_query!r})"):
            query = self._query_parser.parse_query(raw_query)
            matched_documents = self._ranker.find_all_documents(
                query, predicate, self._word_to_document_freqs, self._documents
            )
            return self._ranker.rank_and_trim(matched_documents)

    def match_document(self, raw_query: str, document_id: int) -> Tuple[List[str], Optional[DocumentStatus]]:
        """
        List query plus words found in one document.

        Args:
            raw_query: Query text
            document_id: Document to check

        Returns:
            (matched words in lexicographic order, document status).
            Words are empty when the document contains any minus word.
            Unknown ids are not an error: no words and status None.

        Raises:
            InvalidTermError: query contains an invalid word
        """
        with log_duration(f"match_document({raw_query!r}, {document_id})"):
            query = self._query_parser.parse_query(raw_query)

            matched_words: List[str] = []
            for word in sorted(query.plus_words):
                if document_id in self._word_to_document_freqs.get(word, {}):
                    matched_words.append(word)

            for word in query.minus_words:
                if document_id in self._word_to_document_freqs.get(word, {}):
                    matched_words.clear()
                    break

            data = self._documents.get(document_id)
            return matched_words, data.status if data else None
