"""
RAG Admin Router

Provides endpoints to check the knowledge base and trigger seeding.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from finlit.core.database import get_db
from finlit.services.rag.ingest import run_ingestion
from finlit.services.rag.retriever import KnowledgeStore, get_knowledge_store

router = APIRouter()


class RAGStatusResponse(BaseModel):
    available: bool
    document_count: int
    categories: list[str] = []
    message: str = ""


class IngestResponse(BaseModel):
    status: str
    message: str
    documents_added: int
    questions_added: int


@router.get("/status", response_model=RAGStatusResponse)
async def rag_status(store: KnowledgeStore = Depends(get_knowledge_store)):
    """Check how many knowledge documents are available."""
    info = await store.status()
    return RAGStatusResponse(**info)


@router.post("/ingest", response_model=IngestResponse)
async def trigger_ingestion(db: AsyncSession = Depends(get_db)):
    """
    Seed the knowledge documents and curated questions.

    Records that already exist are left untouched, so this is safe to repeat.
    """
    counts = await run_ingestion(db)
    return IngestResponse(
        status="success",
        message=(
            f"Ingestion complete. {counts['documents_added']} documents and "
            f"{counts['questions_added']} questions added."
        ),
        **counts,
    )
