"""
TF-IDF ranking of indexed documents.

Formula:
    relevance(doc) = Σ tf(word, doc) × idf(word)   over plus words

Where:
    tf(word, doc) = occurrences of word in doc / words in doc (stop words excluded)
    idf(word) = ln(N / df(word))
    N = number of documents in the index
    df(word) = number of documents containing word

Ordering:
    Relevance descending. Relevances closer than EPSILON are treated as
    equal and ordered by rating descending. At most MAX_RESULT_DOCUMENT_COUNT
    results are returned.
"""

import logging
import math
from functools import cmp_to_key
from typing import Callable, Dict, List, Mapping

from .document import Document, DocumentData, DocumentStatus
from .query_parser import Query

logger = logging.getLogger(__name__)

# (document_id, status, rating) -> keep document?
# Must be side-effect free: it is called once per (plus word, candidate document) pair.
DocumentPredicate = Callable[[int, DocumentStatus, int], bool]

# word -> document id -> term frequency
WordToDocumentFreqs = Mapping[str, Mapping[int, float]]


class Ranker:
    """
    Scores documents for a parsed query and orders the result list.

    Ranking policy (result cap, tie-break threshold) is held per instance,
    so indexes with different policies can coexist.
    """

    MAX_RESULT_DOCUMENT_COUNT = 5
    EPSILON = 1e-6

    def __init__(self, max_result_count: int = MAX_RESULT_DOCUMENT_COUNT, epsilon: float = EPSILON):
        """
        Args:
            max_result_count: Maximum number of documents returned by rank_and_trim
            epsilon: Relevance difference below which documents are ordered by rating
        """
        self.max_result_count = max_result_count
        self.epsilon = epsilon

    @staticmethod
    def compute_inverse_document_freq(document_count: int, documents_with_word: int) -> float:
        """IDF = ln(N / df). Caller guarantees df > 0."""
        return math.log(document_count / documents_with_word)

    def find_all_documents(
        self,
        query: Query,
        predicate: DocumentPredicate,
        word_to_document_freqs: WordToDocumentFreqs,
        documents: Mapping[int, DocumentData],
    ) -> List[Document]:
        """
        Compute relevance for every document matching the query.

        Args:
            query: Parsed query
            predicate: Filter over (document_id, status, rating)
            word_to_document_freqs: Inverted index
            documents: Document metadata by id

        Returns:
            Unsorted list of Document results (ascending id)
        """
        document_to_relevance: Dict[int, float] = {}
        document_count = len(documents)

        for word in sorted(query.plus_words):
            postings = word_to_document_freqs.get(word)
            if not postings:
                continue

            inverse_document_freq = self.compute_inverse_document_freq(document_count, len(postings))
            for document_id, term_freq in sorted(postings.items()):
                data = documents[document_id]
                if predicate(document_id, data.status, data.rating):
                    document_to_relevance[document_id] = (
                        document_to_relevance.get(document_id, 0.0)
                        + term_freq * inverse_document_freq
                    )

        for word in sorted(query.minus_words):
            postings = word_to_document_freqs.get(word)
            if not postings:
                continue
            for document_id in sorted(postings):
                document_to_relevance.pop(document_id, None)

        return [
            Document(id=document_id, relevance=relevance, rating=documents[document_id].rating)
            for document_id, relevance in sorted(document_to_relevance.items())
        ]

    def _compare(self, lhs: Document, rhs: Document) -> int:
        if abs(lhs.relevance - rhs.relevance) < self.epsilon:
            return rhs.rating - lhs.rating
        return -1 if lhs.relevance > rhs.relevance else 1

    def rank_and_trim(self, documents: List[Document]) -> List[Document]:
        """
        Sort by relevance (ties within epsilon by rating) and keep the top results.

        Args:
            documents: Results of find_all_documents

        Returns:
            At most max_result_count documents, best first
        """
        ranked = sorted(documents, key=cmp_to_key(self._compare))
        if len(ranked) > self.max_result_count:
            logger.debug(f"Trimming {len(ranked)} matches to top {self.max_result_count}")
            del ranked[self.max_result_count:]
        return ranked
