"""
Progress Store Service

Records one progress entry per scored submission and reads a user's
history back, most recent first.
"""

import logging
import uuid

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from finlit.core.database import get_db
from finlit.core.errors import StoreUnavailable
from finlit.models.progress import ProgressRecord

logger = logging.getLogger(__name__)


class ProgressStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def record(
        self,
        user_id: uuid.UUID,
        category: str,
        score: int,
        total: int,
        answers: list[dict],
    ) -> ProgressRecord:
        """Append a progress record. Records are never updated afterwards."""
        record = ProgressRecord(
            user_id=user_id,
            category=category,
            score=score,
            total=total,
            answers=answers,
        )
        try:
            self.db.add(record)
            await self.db.commit()
        except (SQLAlchemyError, OSError) as e:
            await self.db.rollback()
            raise StoreUnavailable("Progress store unreachable") from e

        logger.info(
            "[Progress] Saved progress %s for user %s: %d/%d in %s",
            record.id, user_id, score, total, category,
        )
        return record

    async def list_for_user(self, user_id: uuid.UUID) -> list[ProgressRecord]:
        """All progress records of a user, newest first."""
        try:
            result = await self.db.execute(
                select(ProgressRecord)
                .where(ProgressRecord.user_id == user_id)
                .order_by(ProgressRecord.created_at.desc())
            )
        except (SQLAlchemyError, OSError) as e:
            logger.error("[Progress] Progress store unreachable: %s", e)
            raise StoreUnavailable("Progress store unreachable") from e

        records = list(result.scalars().all())
        logger.info("[Progress] %d records found for user %s", len(records), user_id)
        return records


def get_progress_store(db: AsyncSession = Depends(get_db)) -> ProgressStore:
    return ProgressStore(db)
