# =============================================================================
# Shared fixtures: in-memory stores and a scripted generative client
# =============================================================================

import uuid
from datetime import datetime, timedelta
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from finlit.core.errors import NotFound, StoreUnavailable
from finlit.services.quiz.models import ItemOrigin, QuizItem
from finlit.services.rag.content import KNOWLEDGE_DOCUMENTS
from finlit.services.rag.models import KnowledgeDocument


# =============================================================================
# Fake stores
# =============================================================================


class FakeKnowledgeStore:
    def __init__(self, documents: list[KnowledgeDocument], fail: bool = False):
        self.documents = documents
        self.fail = fail

    async def fetch_all(self) -> list[KnowledgeDocument]:
        if self.fail:
            raise StoreUnavailable("Knowledge store unreachable")
        return list(self.documents)

    async def status(self) -> dict:
        if self.fail:
            raise StoreUnavailable("Knowledge store unreachable")
        return {
            "available": bool(self.documents),
            "document_count": len(self.documents),
            "categories": sorted({doc.category for doc in self.documents}),
            "message": "",
        }


class FakeQuestionStore:
    def __init__(self, items: list[QuizItem]):
        self.items = {item.id: item for item in items}

    async def get(self, item_id: str) -> QuizItem:
        if item_id not in self.items:
            raise NotFound(f"Question {item_id} not found")
        return self.items[item_id]

    async def list_by_category(self, category: str | None = None) -> list[QuizItem]:
        return [
            item for item in self.items.values()
            if not category or item.category == category
        ]


class FakeProgressStore:
    def __init__(self, fail: bool = False):
        self.records = []
        self.fail = fail

    async def record(self, user_id, category, score, total, answers):
        if self.fail:
            raise StoreUnavailable("Progress store unreachable")
        record = SimpleNamespace(
            id=uuid.uuid4(),
            user_id=user_id,
            category=category,
            score=score,
            total=total,
            answers=answers,
            # Strictly increasing so ordering is deterministic
            created_at=datetime(2026, 1, 1) + timedelta(minutes=len(self.records)),
        )
        self.records.append(record)
        return record

    async def list_for_user(self, user_id):
        records = [r for r in self.records if r.user_id == user_id]
        return sorted(records, key=lambda r: r.created_at, reverse=True)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def knowledge_documents() -> list[KnowledgeDocument]:
    """The seed corpus as the knowledge store would return it."""
    return [
        KnowledgeDocument(
            id=str(index),
            title=record["title"],
            body=record["content"],
            category=record["category"],
            tags=tuple(record["tags"]),
        )
        for index, record in enumerate(KNOWLEDGE_DOCUMENTS)
    ]


@pytest.fixture
def knowledge_store(knowledge_documents) -> FakeKnowledgeStore:
    return FakeKnowledgeStore(knowledge_documents)


@pytest.fixture
def curated_item() -> QuizItem:
    return QuizItem(
        id="3f1c9a52-7d4e-4c1b-9a0e-2b6d8f1e5c77",
        question="What does APR stand for?",
        options=[
            "Annual Percentage Rate",
            "Average Payment Ratio",
            "Annual Payment Return",
            "Applied Principal Rate",
        ],
        correct_option_index=0,
        category="Interest Rates",
        explanation="APR is the yearly cost of borrowing.",
        origin=ItemOrigin.CURATED,
    )


@pytest.fixture
def question_store(curated_item) -> FakeQuestionStore:
    return FakeQuestionStore([curated_item])


@pytest.fixture
def progress_store() -> FakeProgressStore:
    return FakeProgressStore()


@pytest.fixture
def generative_client() -> MagicMock:
    """Generative client whose complete() is scripted per test."""
    client = MagicMock()
    client.complete = AsyncMock(return_value="")
    client.display_name.return_value = "GPT-4o"
    return client


@pytest.fixture
def current_user() -> SimpleNamespace:
    return SimpleNamespace(
        id=uuid.UUID("11111111-2222-3333-4444-555555555555"),
        username="asha",
        created_at=datetime(2026, 1, 1),
    )


@pytest.fixture
def app(knowledge_store, question_store, progress_store, generative_client, current_user):
    """The FastAPI app with every store, the model client and auth replaced."""
    from finlit.core.database import get_db
    from finlit.main import app
    from finlit.routers.auth import get_current_user
    from finlit.services.llm.orchestrator import get_generative_client
    from finlit.services.progress import get_progress_store
    from finlit.services.quiz.question_store import get_question_store
    from finlit.services.rag.retriever import get_knowledge_store

    async def fake_db():
        yield MagicMock()

    app.dependency_overrides = {
        get_db: fake_db,
        get_knowledge_store: lambda: knowledge_store,
        get_question_store: lambda: question_store,
        get_progress_store: lambda: progress_store,
        get_generative_client: lambda: generative_client,
        get_current_user: lambda: current_user,
    }
    yield app
    app.dependency_overrides = {}


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    return TestClient(app)
