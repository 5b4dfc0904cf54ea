"""
Financial Advisor Service

Answers free-form questions grounded in the knowledge base:
retrieve -> rank -> compose grounding prompt -> generate.

A failed or empty generation never fails the request; the user gets a
fixed apology instead, together with the references that were found.
"""

import logging

from pydantic import BaseModel

from finlit.core.errors import GenerativeUnavailable
from finlit.services.llm.orchestrator import GenerativeClient
from finlit.services.prompt_composer import compose_grounding_prompt
from finlit.services.quiz.extractor import extract_answer
from finlit.services.rag.retriever import DEFAULT_TOP_K, KnowledgeStore, retrieve_relevant_documents

logger = logging.getLogger(__name__)

ADVISOR_SOURCE = "Financial literacy AI agent"


class AdvisorAnswer(BaseModel):
    answer: str
    source: str
    model: str
    references: list[str]


class FinancialAdvisor:
    def __init__(self, store: KnowledgeStore, client: GenerativeClient, top_k: int = DEFAULT_TOP_K):
        self.store = store
        self.client = client
        self.top_k = top_k

    async def ask(self, question: str) -> AdvisorAnswer:
        # Store failures are fatal here; only the generative step has a fallback
        documents = await retrieve_relevant_documents(self.store, question, self.top_k)
        prompt = compose_grounding_prompt(question, documents)

        try:
            raw = await self.client.complete(prompt)
        except GenerativeUnavailable as e:
            logger.error(
                "[Advisor] Generation failed (upstream status %s): %s", e.upstream_status, e
            )
            raw = None

        return AdvisorAnswer(
            answer=extract_answer(raw),
            source=ADVISOR_SOURCE,
            model=self.client.display_name(),
            references=[doc.title for doc in documents],
        )
