"""
Unit tests for TF-IDF scoring and result ordering.
"""

import math

import pytest
from docsearch.engine.document import Document, DocumentData, DocumentStatus
from docsearch.engine.query_parser import Query
from docsearch.engine.ranker import Ranker


def accept_all(document_id, status, rating):
    return True


@pytest.fixture
def index():
    """Inverted index for 'qwe ewq dsa' (id 0) and 'qwe asd zxc dsa' (id 1)"""
    word_to_document_freqs = {
        "qwe": {0: 1 / 3, 1: 0.25},
        "ewq": {0: 1 / 3},
        "dsa": {0: 1 / 3, 1: 0.25},
        "asd": {1: 0.25},
        "zxc": {1: 0.25},
    }
    documents = {
        0: DocumentData(rating=2, status=DocumentStatus.ACTUAL),
        1: DocumentData(rating=5, status=DocumentStatus.BANNED),
    }
    return word_to_document_freqs, documents


class TestFindAllDocuments:
    """Test relevance accumulation and minus-word exclusion"""

    def test_idf_zero_when_word_in_every_document(self, index):
        ranker = Ranker()
        results = ranker.find_all_documents(Query(plus_words={"qwe", "dsa"}), accept_all, *index)

        assert [doc.id for doc in results] == [0, 1]
        assert all(doc.relevance < Ranker.EPSILON for doc in results)

    def test_tf_idf_relevance(self, index):
        ranker = Ranker()
        results = {doc.id: doc for doc in ranker.find_all_documents(
            Query(plus_words={"qwe", "asd"}), accept_all, *index
        )}

        assert results[1].relevance == pytest.approx(math.log(2) * 0.25)
        assert results[1].relevance == pytest.approx(0.17328675, abs=1e-6)
        assert results[0].relevance < Ranker.EPSILON

    def test_rating_copied_from_metadata(self, index):
        results = Ranker().find_all_documents(Query(plus_words={"asd"}), accept_all, *index)
        assert results == [Document(id=1, relevance=pytest.approx(math.log(2) * 0.25), rating=5)]

    def test_unknown_plus_word_contributes_nothing(self, index):
        results = Ranker().find_all_documents(Query(plus_words={"nothing"}), accept_all, *index)
        assert results == []

    def test_minus_word_removes_documents(self, index):
        results = Ranker().find_all_documents(
            Query(plus_words={"qwe"}, minus_words={"asd"}), accept_all, *index
        )
        assert [doc.id for doc in results] == [0]

    def test_unknown_minus_word_ignored(self, index):
        results = Ranker().find_all_documents(
            Query(plus_words={"qwe"}, minus_words={"nothing"}), accept_all, *index
        )
        assert len(results) == 2

    def test_predicate_receives_metadata(self, index):
        calls = []

        def predicate(document_id, status, rating):
            calls.append((document_id, status, rating))
            return status == DocumentStatus.BANNED

        results = Ranker().find_all_documents(Query(plus_words={"qwe", "dsa"}), predicate, *index)

        assert [doc.id for doc in results] == [1]
        # Called once per (plus word, candidate document) pair
        assert len(calls) == 4
        assert (1, DocumentStatus.BANNED, 5) in calls
        assert (0, DocumentStatus.ACTUAL, 2) in calls


class TestRankAndTrim:
    """Test ordering policy and result cap"""

    def test_sorted_by_relevance_descending(self):
        documents = [Document(0, 0.1, 1), Document(1, 0.5, 1), Document(2, 0.3, 1)]
        assert [doc.id for doc in Ranker().rank_and_trim(documents)] == [1, 2, 0]

    def test_ties_broken_by_rating(self):
        """Test relevances within epsilon are ordered by rating descending"""
        documents = [
            Document(0, 0.5, 1),
            Document(1, 0.5 + 1e-7, 3),
            Document(2, 0.5 - 1e-7, 2),
        ]
        assert [doc.id for doc in Ranker().rank_and_trim(documents)] == [1, 2, 0]

    def test_difference_above_epsilon_ignores_rating(self):
        documents = [Document(0, 0.5, 10), Document(1, 0.5 + 1e-5, 1)]
        assert [doc.id for doc in Ranker().rank_and_trim(documents)] == [1, 0]

    def test_trimmed_to_five(self):
        documents = [Document(i, i * 0.1, 0) for i in range(8)]
        ranked = Ranker().rank_and_trim(documents)

        assert len(ranked) == Ranker.MAX_RESULT_DOCUMENT_COUNT == 5
        assert [doc.id for doc in ranked] == [7, 6, 5, 4, 3]

    def test_custom_policy(self):
        """Test ranking policy is per instance"""
        documents = [Document(0, 0.5, 1), Document(1, 0.51, 9), Document(2, 0.1, 0)]
        ranker = Ranker(max_result_count=2, epsilon=0.1)

        assert [doc.id for doc in ranker.rank_and_trim(documents)] == [1, 0]
        assert Ranker().max_result_count == 5

    def test_empty_input(self):
        assert Ranker().rank_and_trim([]) == []


class TestDocument:
    """Test result formatting"""

    def test_str(self):
        assert str(Document(1, 0.5, 2)) == "{ document_id = 1, relevance = 0.5, rating = 2 }"

    def test_status_str(self):
        assert str(DocumentStatus.BANNED) == "BANNED"
