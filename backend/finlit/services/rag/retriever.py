"""
RAG Retriever Service

Finds the knowledge documents most relevant to a user's question.

Uses lexical keyword overlap instead of embeddings, so the ranking is
deterministic and testable without a semantic index.

How retrieval works:
1. KnowledgeStore.fetch_all() loads every document tagged as knowledge content.
2. The question is lower-cased and split on whitespace into keywords.
3. Each document scores one point per keyword found anywhere in its title + body.
4. Documents scoring zero are dropped; the rest are stably sorted and cut to top-K.
"""

import logging

from fastapi import Depends
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from finlit.core.config import Settings, get_settings
from finlit.core.database import get_db
from finlit.core.errors import StoreUnavailable
from finlit.models.knowledge import FinancialContent
from finlit.services.rag.models import KnowledgeDocument, RankedDocument

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 3


# ── Knowledge store ──────────────────────────────────────────────────────────

class KnowledgeStore:
    """Read-only access to the seeded knowledge documents."""

    def __init__(self, db: AsyncSession, doc_type: str = "financial_content"):
        self.db = db
        self.doc_type = doc_type

    async def fetch_all(self) -> list[KnowledgeDocument]:
        """
        Return every knowledge document in store order.

        An empty list is a valid answer (nothing seeded yet); only an
        unreachable store raises.
        """
        try:
            result = await self.db.execute(
                select(FinancialContent)
                .where(FinancialContent.doc_type == self.doc_type)
                .order_by(FinancialContent.created_at, FinancialContent.id)
            )
            rows = result.scalars().all()
        except (SQLAlchemyError, OSError) as e:
            logger.error("[RAG] Knowledge store unreachable: %s", e)
            raise StoreUnavailable("Knowledge store unreachable") from e

        if not rows:
            logger.warning("[RAG] No knowledge documents found (run ingestion first)")

        return [
            KnowledgeDocument(
                id=str(row.id),
                title=row.title,
                body=row.content,
                category=row.category,
                tags=tuple(row.tags or ()),
            )
            for row in rows
        ]

    async def status(self) -> dict:
        """Return status info about the knowledge store for the /rag/status endpoint."""
        try:
            count = await self.db.scalar(
                select(func.count())
                .select_from(FinancialContent)
                .where(FinancialContent.doc_type == self.doc_type)
            )
            result = await self.db.execute(
                select(FinancialContent.category)
                .where(FinancialContent.doc_type == self.doc_type)
                .distinct()
            )
            categories = sorted(result.scalars().all())
        except (SQLAlchemyError, OSError) as e:
            logger.error("[RAG] Knowledge store unreachable: %s", e)
            raise StoreUnavailable("Knowledge store unreachable") from e

        return {
            "available": bool(count),
            "document_count": count or 0,
            "categories": categories,
            "message": "" if count else "No knowledge documents. Run ingestion first.",
        }


def get_knowledge_store(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> KnowledgeStore:
    return KnowledgeStore(db, doc_type=settings.knowledge_doc_type)


# ── Ranking ──────────────────────────────────────────────────────────────────

def extract_keywords(query: str) -> list[str]:
    """Lower-case and whitespace-split; no stemming, no stop words."""
    return query.lower().split()


def score_document(keywords: list[str], document: KnowledgeDocument) -> int:
    haystack = f"{document.title} {document.body}".lower()
    return sum(1 for keyword in keywords if keyword in haystack)


def rank(
    query: str,
    corpus: list[KnowledgeDocument],
    k: int = DEFAULT_TOP_K,
) -> list[RankedDocument]:
    """
    Rank knowledge documents against a free-text query.

    Args:
        query: The user's question, verbatim
        corpus: Documents in store order
        k: Maximum number of documents to return

    Returns:
        At most k documents with score > 0, highest score first.
        Equal scores keep their corpus order.
    """
    keywords = extract_keywords(query)
    if not keywords or k <= 0:
        return []

    scored = [
        RankedDocument(document=doc, score=score_document(keywords, doc))
        for doc in corpus
    ]
    relevant = [doc for doc in scored if doc.score > 0]
    # sorted() is stable, so ties stay in store order
    relevant = sorted(relevant, key=lambda doc: doc.score, reverse=True)
    return relevant[:k]


async def retrieve_relevant_documents(
    store: KnowledgeStore,
    question: str,
    top_k: int = DEFAULT_TOP_K,
) -> list[RankedDocument]:
    """Fetch the corpus and rank it against the question."""
    corpus = await store.fetch_all()
    ranked = rank(question, corpus, top_k)
    logger.info(
        "[RAG] Retrieved %d of %d documents for: %s", len(ranked), len(corpus), question
    )
    return ranked
