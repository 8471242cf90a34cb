"""Utility functions for the search engine"""

import logging
import time
from contextlib import contextmanager
from typing import Iterator, Optional

logger = logging.getLogger("docsearch")


@contextmanager
def log_duration(operation: str, level: int = logging.DEBUG, log: Optional[logging.Logger] = None) -> Iterator[None]:
    """
    Log how long a block of code took.

    Args:
        operation: Label written in front of the duration
        level: Logging level for the timing record
        log: Logger to use (default: "docsearch")

    Examples:
        >>> with log_duration("find_top_documents"):
        ...     server.find_top_documents("curly dog")
        # DEBUG: find_top_documents: 0.042 ms
    """
    target = log or logger
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        target.log(level, f"{operation}: {elapsed_ms:.3f} ms")
