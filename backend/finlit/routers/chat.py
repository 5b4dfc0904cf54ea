"""
Chat Router

Free-form financial questions answered by the grounded advisor.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, field_validator

from finlit.core.config import Settings, get_settings
from finlit.services.advisor import AdvisorAnswer, FinancialAdvisor
from finlit.services.llm.orchestrator import GenerativeClient, get_generative_client
from finlit.services.rag.retriever import KnowledgeStore, get_knowledge_store

router = APIRouter()


class AskRequest(BaseModel):
    question: str

    @field_validator("question")
    @classmethod
    def question_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Question is required")
        return value


def get_advisor(
    store: KnowledgeStore = Depends(get_knowledge_store),
    client: GenerativeClient = Depends(get_generative_client),
    settings: Settings = Depends(get_settings),
) -> FinancialAdvisor:
    return FinancialAdvisor(store, client, top_k=settings.retrieval_top_k)


@router.post("/ask", response_model=AdvisorAnswer)
async def ask(data: AskRequest, advisor: FinancialAdvisor = Depends(get_advisor)):
    """Answer a question using the knowledge base as grounding."""
    return await advisor.ask(data.question)
