# =============================================================================
# Database-backed stores and content seeding (session mocked)
# =============================================================================

import uuid
from datetime import datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from finlit.core.errors import NotFound, StoreUnavailable
from finlit.services.progress import ProgressStore
from finlit.services.quiz.models import ItemOrigin
from finlit.services.quiz.question_store import QuestionStore
from finlit.services.rag.content import CURATED_QUESTIONS, KNOWLEDGE_DOCUMENTS
from finlit.services.rag.ingest import run_ingestion, seed_knowledge, seed_questions
from finlit.services.rag.retriever import KnowledgeStore


def mock_session() -> MagicMock:
    db = MagicMock()
    db.execute = AsyncMock()
    db.get = AsyncMock()
    db.scalar = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    return db


def scalar_rows(rows) -> MagicMock:
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    return result


def question_row(**overrides) -> SimpleNamespace:
    row = dict(
        id=uuid.uuid4(),
        question="What is a credit score?",
        options=["A rating", "A loan", "A bank", "A tax"],
        answer=0,
        category="Budgeting",
        explanation=None,
        created_at=datetime(2026, 1, 1),
    )
    row.update(overrides)
    return SimpleNamespace(**row)


class TestKnowledgeStore:
    @pytest.mark.asyncio
    async def test_rows_become_documents(self):
        db = mock_session()
        row_id = uuid.uuid4()
        db.execute.return_value = scalar_rows([
            SimpleNamespace(
                id=row_id,
                title="Budgeting Basics",
                content="Track your expenses.",
                category="Budgeting",
                tags=["budgeting"],
            )
        ])

        documents = await KnowledgeStore(db).fetch_all()

        assert documents[0].id == str(row_id)
        assert documents[0].body == "Track your expenses."
        assert documents[0].tags == ("budgeting",)

    @pytest.mark.asyncio
    async def test_empty_store_is_not_an_error(self):
        db = mock_session()
        db.execute.return_value = scalar_rows([])
        assert await KnowledgeStore(db).fetch_all() == []

    @pytest.mark.asyncio
    async def test_unreachable_store(self):
        db = mock_session()
        db.execute.side_effect = OperationalError("SELECT", {}, Exception("refused"))
        with pytest.raises(StoreUnavailable):
            await KnowledgeStore(db).fetch_all()

    @pytest.mark.asyncio
    async def test_status_reports_count_and_categories(self):
        db = mock_session()
        db.scalar.return_value = 2
        db.execute.return_value = scalar_rows(["UPI Safety", "Budgeting"])

        status = await KnowledgeStore(db).status()

        assert status == {
            "available": True,
            "document_count": 2,
            "categories": ["Budgeting", "UPI Safety"],
            "message": "",
        }


class TestQuestionStore:
    @pytest.mark.asyncio
    async def test_get_maps_row_to_curated_item(self):
        db = mock_session()
        row = question_row(answer=2)
        db.get.return_value = row

        item = await QuestionStore(db).get(str(row.id))

        assert item.id == str(row.id)
        assert item.correct_option_index == 2
        assert item.origin == ItemOrigin.CURATED
        assert item.explanation == ""

    @pytest.mark.asyncio
    async def test_missing_row_is_not_found(self):
        db = mock_session()
        db.get.return_value = None
        with pytest.raises(NotFound):
            await QuestionStore(db).get(str(uuid.uuid4()))

    @pytest.mark.asyncio
    async def test_non_uuid_id_is_not_found_without_query(self):
        db = mock_session()
        with pytest.raises(NotFound):
            await QuestionStore(db).get("question-7")
        db.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_unreachable_store(self):
        db = mock_session()
        db.get.side_effect = SQLAlchemyError("down")
        with pytest.raises(StoreUnavailable):
            await QuestionStore(db).get(str(uuid.uuid4()))

    @pytest.mark.asyncio
    async def test_list_by_category(self):
        db = mock_session()
        db.execute.return_value = scalar_rows([question_row(), question_row(answer=3)])

        items = await QuestionStore(db).list_by_category("Budgeting")

        assert [item.correct_option_index for item in items] == [0, 3]


class TestProgressStore:
    @pytest.mark.asyncio
    async def test_record_commits_one_row(self):
        db = mock_session()
        user_id = uuid.uuid4()

        record = await ProgressStore(db).record(user_id, "Budgeting", 3, 5, [])

        db.add.assert_called_once_with(record)
        db.commit.assert_awaited_once()
        assert (record.user_id, record.score, record.total) == (user_id, 3, 5)

    @pytest.mark.asyncio
    async def test_record_leaves_timestamp_to_column_default(self):
        from finlit.models.progress import ProgressRecord

        record = await ProgressStore(mock_session()).record(uuid.uuid4(), "Budgeting", 1, 1, [])

        assert record.created_at is None
        assert ProgressRecord.__table__.c.created_at.default is not None

    @pytest.mark.asyncio
    async def test_record_failure_rolls_back(self):
        db = mock_session()
        db.commit.side_effect = SQLAlchemyError("disk full")

        with pytest.raises(StoreUnavailable):
            await ProgressStore(db).record(uuid.uuid4(), "Budgeting", 0, 1, [])
        db.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_list_for_user(self):
        db = mock_session()
        rows = [SimpleNamespace(id=1), SimpleNamespace(id=2)]
        db.execute.return_value = scalar_rows(rows)

        assert await ProgressStore(db).list_for_user(uuid.uuid4()) == rows
        db.execute.assert_awaited_once()


class TestIngestion:
    @pytest.mark.asyncio
    async def test_existing_documents_are_skipped(self):
        db = mock_session()
        db.execute.return_value = scalar_rows([KNOWLEDGE_DOCUMENTS[0]["title"]])

        added = await seed_knowledge(db, "financial_content")

        assert added == len(KNOWLEDGE_DOCUMENTS) - 1
        assert db.add.call_count == added

    @pytest.mark.asyncio
    async def test_questions_are_seeded_once(self):
        db = mock_session()
        db.execute.return_value = scalar_rows([q["question"] for q in CURATED_QUESTIONS])
        assert await seed_questions(db) == 0

    @pytest.mark.asyncio
    async def test_run_ingestion_counts(self):
        db = mock_session()
        db.execute.return_value = scalar_rows([])

        counts = await run_ingestion(db)

        assert counts == {
            "documents_added": len(KNOWLEDGE_DOCUMENTS),
            "questions_added": len(CURATED_QUESTIONS),
        }
        db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_run_ingestion_failure(self):
        db = mock_session()
        db.execute.side_effect = SQLAlchemyError("down")

        with pytest.raises(StoreUnavailable):
            await run_ingestion(db)
        db.rollback.assert_awaited_once()
