"""
In-process document search engine with TF-IDF ranking.

Components:
- tokenizer: Space-delimited word splitting
- validation: Term-validity rule (no leading/trailing '-', no control characters)
- query_parser: Plus/minus word extraction with stop-word filtering
- ranker: TF-IDF relevance, rating tie-break, top-5 cutoff
- search_server: Inverted index and document metadata
- request_queue: Rolling count of empty-result requests
- paginator: Page splitting for result lists
"""

from .document import Document, DocumentStatus, compute_average_rating
from .errors import (
    DocumentIndexOutOfRangeError,
    InvalidArgumentError,
    InvalidTermError,
    SearchServerError,
)
from .paginator import Page, Paginator, paginate
from .query_parser import Query, QueryParser
from .ranker import DocumentPredicate, Ranker
from .request_queue import RequestQueue
from .search_server import SearchServer
from .tokenizer import split_into_words
from .validation import TermCheck, is_valid_word, validate_word

__all__ = [
    "Document",
    "DocumentStatus",
    "compute_average_rating",
    "SearchServerError",
    "InvalidArgumentError",
    "InvalidTermError",
    "DocumentIndexOutOfRangeError",
    "Page",
    "Paginator",
    "paginate",
    "Query",
    "QueryParser",
    "DocumentPredicate",
    "Ranker",
    "RequestQueue",
    "SearchServer",
    "split_into_words",
    "TermCheck",
    "is_valid_word",
    "validate_word",
]
