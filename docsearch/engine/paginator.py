"""
Pagination of an already computed result list.

Example:
    >>> pages = paginate([1, 2, 3, 4, 5], 2)
    >>> [list(page) for page in pages]
    [[1, 2], [3, 4], [5]]
"""

from typing import Generic, Iterator, List, Sequence, TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")


class Page(Generic[T]):
    """Contiguous slice of the paginated sequence"""

    def __init__(self, items: Sequence[T]):
        self._items = items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __str__(self) -> str:
        return "".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"Page({list(self._items)!r})"


class Paginator(Generic[T]):
    """Splits a sequence into pages of page_size items (last page may be shorter)"""

    def __init__(self, items: Sequence[T], page_size: int):
        if page_size < 1:
            raise InvalidArgumentError(f"Page size must be positive, got {page_size}")

        self.page_size = page_size
        self._pages: List[Page[T]] = [
            Page(items[start:start + page_size])
            for start in range(0, len(items), page_size)
        ]

    def __iter__(self) -> Iterator[Page[T]]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __getitem__(self, index: int) -> Page[T]:
        return self._pages[index]


def paginate(items: Sequence[T], page_size: int) -> Paginator[T]:
    """Shortcut for Paginator(items, page_size)"""
    return Paginator(items, page_size)
