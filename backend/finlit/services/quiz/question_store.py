"""
Curated Question Store

Curated questions are authored in advance and stored with their answer,
so their ids are plain store keys resolved by lookup.
"""

import logging
import uuid

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from finlit.core.database import get_db
from finlit.core.errors import NotFound, StoreUnavailable
from finlit.models.question import Question
from finlit.services.quiz.models import ItemOrigin, QuizItem

logger = logging.getLogger(__name__)


def to_quiz_item(question: Question) -> QuizItem:
    return QuizItem(
        id=str(question.id),
        question=question.question,
        options=list(question.options),
        correct_option_index=question.answer,
        category=question.category,
        explanation=question.explanation or "",
        origin=ItemOrigin.CURATED,
    )


class QuestionStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, item_id: str) -> QuizItem:
        """
        Look up a curated question by id.

        Raises:
            NotFound: no question has this id (including ids that are not UUIDs)
            StoreUnavailable: the store could not be reached
        """
        try:
            key = uuid.UUID(item_id)
        except ValueError:
            raise NotFound(f"Question {item_id} not found")

        try:
            question = await self.db.get(Question, key)
        except (SQLAlchemyError, OSError) as e:
            logger.error("[Quiz] Question store unreachable: %s", e)
            raise StoreUnavailable("Question store unreachable") from e

        if question is None:
            raise NotFound(f"Question {item_id} not found")
        return to_quiz_item(question)

    async def list_by_category(self, category: str | None = None) -> list[QuizItem]:
        query = select(Question).order_by(Question.created_at, Question.id)
        if category:
            query = query.where(Question.category == category)

        try:
            result = await self.db.execute(query)
        except (SQLAlchemyError, OSError) as e:
            logger.error("[Quiz] Question store unreachable: %s", e)
            raise StoreUnavailable("Question store unreachable") from e

        return [to_quiz_item(question) for question in result.scalars().all()]


def get_question_store(db: AsyncSession = Depends(get_db)) -> QuestionStore:
    return QuestionStore(db)
