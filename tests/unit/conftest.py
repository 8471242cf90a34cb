"""Unit test configuration - isolated environment and common indexes"""

import pytest

from docsearch.engine import DocumentStatus, SearchServer


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """
    Remove DOCSEARCH_* variables for each unit test.

    Settings tests set exactly what they need; a developer's shell or
    .env.local must not leak into assertions.
    """
    for name in ("DOCSEARCH_STOP_WORDS", "DOCSEARCH_LOG_LEVEL", "DOCSEARCH_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def cat_server():
    """Index with stop words {in, the} and two cat documents"""
    server = SearchServer("in the")
    server.add_document(0, "cat in the city", DocumentStatus.ACTUAL, [1, 2, 3])
    server.add_document(1, "cat in the garden", DocumentStatus.ACTUAL, [1, 2, 3])
    return server


@pytest.fixture
def pet_server():
    """Five ACTUAL documents with different ratings"""
    server = SearchServer("and with")
    server.add_document(1, "funny pet and nasty rat", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "funny pet with curly hair", DocumentStatus.ACTUAL, [1, 2, 3])
    server.add_document(3, "big cat nasty hair", DocumentStatus.ACTUAL, [1, 2, 8])
    server.add_document(4, "big dog cat Vladislav", DocumentStatus.ACTUAL, [1, 3, 2])
    server.add_document(5, "big dog hamster Borya", DocumentStatus.ACTUAL, [1, 1, 1])
    return server
