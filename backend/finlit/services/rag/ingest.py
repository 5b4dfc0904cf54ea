"""
Content Ingestion Script

Seeds the knowledge base and the curated question bank into the database.

How it works:
1. LOAD   – the seed records come from finlit.services.rag.content
2. DEDUP  – records already present (same title / same question text) are skipped
3. STORE  – new rows are added in one transaction, knowledge rows tagged with
           the configured knowledge doc_type so the retriever can find them

Running it twice is harmless.

Usage:
    cd backend
    python -m finlit.services.rag.ingest
"""

import asyncio
import logging
import sys

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from finlit.core.config import get_settings
from finlit.core.errors import StoreUnavailable
from finlit.models.knowledge import FinancialContent
from finlit.models.question import Question
from finlit.services.rag.content import CURATED_QUESTIONS, KNOWLEDGE_DOCUMENTS

logger = logging.getLogger(__name__)


async def seed_knowledge(db: AsyncSession, doc_type: str) -> int:
    result = await db.execute(
        select(FinancialContent.title).where(FinancialContent.doc_type == doc_type)
    )
    existing = set(result.scalars().all())

    added = 0
    for record in KNOWLEDGE_DOCUMENTS:
        if record["title"] in existing:
            continue
        db.add(FinancialContent(doc_type=doc_type, **record))
        added += 1
    logger.info("[Ingest] %d knowledge documents to add", added)
    return added


async def seed_questions(db: AsyncSession) -> int:
    result = await db.execute(select(Question.question))
    existing = set(result.scalars().all())

    added = 0
    for record in CURATED_QUESTIONS:
        if record["question"] in existing:
            continue
        db.add(Question(**record))
        added += 1
    logger.info("[Ingest] %d curated questions to add", added)
    return added


async def run_ingestion(db: AsyncSession) -> dict:
    """Run the full seeding pipeline. Returns the number of rows added per table."""
    settings = get_settings()
    try:
        documents = await seed_knowledge(db, settings.knowledge_doc_type)
        questions = await seed_questions(db)
        await db.commit()
    except (SQLAlchemyError, OSError) as e:
        await db.rollback()
        logger.error("[Ingest] Seeding failed: %s", e)
        raise StoreUnavailable("Content store unreachable") from e

    logger.info(
        "[Ingest] Seeding complete: %d documents, %d questions added", documents, questions
    )
    return {"documents_added": documents, "questions_added": questions}


async def _main() -> None:
    from finlit.core.database import async_session, engine

    try:
        async with async_session() as db:
            counts = await run_ingestion(db)
    finally:
        await engine.dispose()

    print("=" * 60)
    print(
        f"Ingestion complete! {counts['documents_added']} documents and "
        f"{counts['questions_added']} questions added."
    )
    print("=" * 60)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    try:
        asyncio.run(_main())
    except StoreUnavailable as e:
        print(f"[Ingest] ERROR: {e}")
        sys.exit(1)
