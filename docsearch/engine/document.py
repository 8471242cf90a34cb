"""
Document metadata and search result types.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class DocumentStatus(Enum):
    """Lifecycle status attached to every indexed document"""
    ACTUAL = "ACTUAL"
    IRRELEVANT = "IRRELEVANT"
    BANNED = "BANNED"
    REMOVED = "REMOVED"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class DocumentData:
    """Per-document metadata stored by the index"""
    rating: int
    status: DocumentStatus


@dataclass
class Document:
    """Single search result with relevance score"""
    id: int             # Document id as passed to add_document
    relevance: float = 0.0  # Sum of TF-IDF over matched query words
    rating: int = 0     # Average rating, used as tie-break

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.id}, relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )


def compute_average_rating(ratings: Sequence[int]) -> int:
    """
    Average of ratings, truncated toward zero.

    Args:
        ratings: Per-document scores supplied by the caller

    Returns:
        Integer average, 0 for an empty list

    Examples:
        >>> compute_average_rating([1, 2, 3, 4])
        2
        >>> compute_average_rating([-1, -2])
        -1
        >>> compute_average_rating([])
        0
    """
    if not ratings:
        return 0

    total = sum(ratings)
    # Floor division rounds negatives down, truncate toward zero instead
    average = abs(total) // len(ratings)
    return average if total >= 0 else -average
