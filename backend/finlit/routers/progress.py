from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from finlit.core.schemas import CamelModel
from finlit.models.user import User
from finlit.routers.auth import get_current_user
from finlit.routers.quiz import ItemResultResponse, to_result_response
from finlit.services.progress import ProgressStore, get_progress_store
from finlit.services.quiz.models import ScoredResult
from finlit.services.quiz.scoring import percentage

router = APIRouter()


class ProgressRecordResponse(CamelModel):
    id: str
    category: str
    score: int
    total_questions: int
    percentage: int
    answers: list[ItemResultResponse]
    date: datetime


class ProgressResponse(CamelModel):
    progress: list[ProgressRecordResponse]


CurrentUser = Annotated[User, Depends(get_current_user)]


@router.get("", response_model=ProgressResponse, response_model_by_alias=True)
async def get_progress(
    current_user: CurrentUser,
    store: ProgressStore = Depends(get_progress_store),
):
    """Get the current user's quiz history, most recent first."""
    records = await store.list_for_user(current_user.id)
    return ProgressResponse(
        progress=[
            ProgressRecordResponse(
                id=str(record.id),
                category=record.category,
                score=record.score,
                total_questions=record.total,
                percentage=percentage(record.score, record.total),
                # Answers are stored as dumped ScoredResults
                answers=[
                    to_result_response(ScoredResult(**answer))
                    for answer in record.answers or []
                ],
                date=record.created_at,
            )
            for record in records
        ]
    )
