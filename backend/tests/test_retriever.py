# =============================================================================
# Relevance ranking and retrieval
# =============================================================================

import pytest

from finlit.core.errors import StoreUnavailable
from finlit.services.rag.models import KnowledgeDocument
from finlit.services.rag.retriever import (
    extract_keywords,
    rank,
    retrieve_relevant_documents,
    score_document,
)

from conftest import FakeKnowledgeStore


def make_doc(doc_id: str, title: str, body: str = "") -> KnowledgeDocument:
    return KnowledgeDocument(id=doc_id, title=title, body=body, category="General")


class TestKeywords:
    def test_lowercases_and_splits_on_whitespace(self):
        assert extract_keywords("What  is\tCompound Interest?") == [
            "what", "is", "compound", "interest?",
        ]

    def test_blank_query_has_no_keywords(self):
        assert extract_keywords("   ") == []

    def test_score_counts_each_keyword_once_per_occurrence_in_query(self):
        doc = make_doc("1", "Savings", "interest interest interest")
        assert score_document(["interest"], doc) == 1
        assert score_document(["interest", "interest"], doc) == 2

    def test_substring_match_counts(self):
        doc = make_doc("1", "Budgeting Basics", "")
        assert score_document(["budget"], doc) == 1


class TestRank:
    def test_compound_interest_finds_interest_rates_document(self, knowledge_documents):
        """A question about compound interest ranks the interest document first."""
        ranked = rank("What is compound interest?", knowledge_documents)

        titles = [doc.title for doc in ranked]
        assert "Interest Rates Explained" in titles
        interest = next(doc for doc in ranked if doc.title == "Interest Rates Explained")
        assert interest.score >= 1
        assert ranked[0].title == "Interest Rates Explained"

    def test_never_returns_more_than_k(self, knowledge_documents):
        ranked = rank("a the is of and to", knowledge_documents, k=2)
        assert len(ranked) <= 2

    def test_scores_are_non_increasing_and_positive(self, knowledge_documents):
        ranked = rank("upi pin bank account safety", knowledge_documents)

        scores = [doc.score for doc in ranked]
        assert scores == sorted(scores, reverse=True)
        assert all(score > 0 for score in scores)

    def test_ties_keep_corpus_order(self):
        corpus = [
            make_doc("1", "First budget"),
            make_doc("2", "Second budget"),
            make_doc("3", "Third budget"),
        ]
        ranked = rank("budget", corpus, k=3)
        assert [doc.document.id for doc in ranked] == ["1", "2", "3"]

    def test_higher_score_wins_over_corpus_order(self):
        corpus = [
            make_doc("1", "Loans", "interest"),
            make_doc("2", "Compound interest", "interest compounds"),
        ]
        ranked = rank("compound interest", corpus)
        assert ranked[0].document.id == "2"
        assert ranked[0].score == 2

    def test_empty_query_returns_nothing(self, knowledge_documents):
        assert rank("", knowledge_documents) == []

    def test_empty_corpus_returns_nothing(self):
        assert rank("interest", []) == []

    def test_no_matching_document_returns_nothing(self, knowledge_documents):
        assert rank("xylophone", knowledge_documents) == []

    def test_ranking_is_deterministic(self, knowledge_documents):
        first = rank("how do I keep my bank account safe", knowledge_documents)
        second = rank("how do I keep my bank account safe", knowledge_documents)
        assert first == second


class TestRetrieve:
    @pytest.mark.asyncio
    async def test_uses_store_contents(self, knowledge_store):
        ranked = await retrieve_relevant_documents(knowledge_store, "budget", top_k=1)
        assert len(ranked) == 1
        assert ranked[0].title == "Budgeting Basics"

    @pytest.mark.asyncio
    async def test_unreachable_store_propagates(self):
        store = FakeKnowledgeStore([], fail=True)
        with pytest.raises(StoreUnavailable):
            await retrieve_relevant_documents(store, "budget")
