from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import Field, field_validator

from finlit.core.config import Settings, get_settings
from finlit.core.schemas import CamelModel
from finlit.routers.auth import get_current_user
from finlit.models.user import User
from finlit.services.llm.orchestrator import GenerativeClient, get_generative_client
from finlit.services.progress import ProgressStore, get_progress_store
from finlit.services.quiz.generator import QuizGenerator
from finlit.services.quiz.models import QuizItem, ScoredResult
from finlit.services.quiz.question_store import QuestionStore, get_question_store
from finlit.services.quiz.scoring import ScoringEngine

router = APIRouter()


# Schemas
class GenerateQuizRequest(CamelModel):
    category: str
    count: int | None = Field(default=None, ge=1, le=20)

    @field_validator("category")
    @classmethod
    def category_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Category is required")
        return value


class QuizItemResponse(CamelModel):
    """A quiz item as shown to the user: the correct index is never included."""

    id: str
    question: str
    options: list[str]
    category: str
    explanation: str
    origin: str


class GenerateQuizResponse(CamelModel):
    questions: list[QuizItemResponse]
    category: str
    generated_at: datetime
    source: str


class QuestionListResponse(CamelModel):
    questions: list[QuizItemResponse]


class SubmitRequest(CamelModel):
    answers: dict[str, int]
    category: str

    @field_validator("answers")
    @classmethod
    def answers_required(cls, value: dict[str, int]) -> dict[str, int]:
        if not value:
            raise ValueError("Answers are required")
        return value

    @field_validator("category")
    @classmethod
    def category_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Category is required")
        return value


class ItemResultResponse(CamelModel):
    item_id: str
    user_answer: int
    correct_answer: int
    is_correct: bool


class SubmitResponse(CamelModel):
    score: int
    total_questions: int
    percentage: int
    results: list[ItemResultResponse]
    recorded: bool


def to_result_response(result: ScoredResult) -> ItemResultResponse:
    return ItemResultResponse(
        item_id=result.item_id,
        user_answer=result.chosen_index,
        correct_answer=result.correct_index,
        is_correct=result.is_correct,
    )


def to_item_response(item: QuizItem) -> QuizItemResponse:
    return QuizItemResponse(
        id=item.id,
        question=item.question,
        options=item.options,
        category=item.category,
        explanation=item.explanation,
        origin=item.origin.value,
    )


# Dependencies
def get_quiz_generator(
    client: GenerativeClient = Depends(get_generative_client),
) -> QuizGenerator:
    return QuizGenerator(client)


def get_scoring_engine(
    questions: QuestionStore = Depends(get_question_store),
    progress: ProgressStore = Depends(get_progress_store),
) -> ScoringEngine:
    return ScoringEngine(questions, progress)


CurrentUser = Annotated[User, Depends(get_current_user)]


# Endpoints
@router.post("/generate", response_model=GenerateQuizResponse, response_model_by_alias=True)
async def generate_quiz(
    data: GenerateQuizRequest,
    generator: QuizGenerator = Depends(get_quiz_generator),
    settings: Settings = Depends(get_settings),
):
    """Generate a quiz for a category. Always returns at least one question."""
    count = data.count or settings.default_question_count
    quiz = await generator.generate(data.category, count)
    return GenerateQuizResponse(
        questions=[to_item_response(item) for item in quiz.items],
        category=quiz.category,
        generated_at=quiz.generated_at,
        source=quiz.source,
    )


@router.get("/questions", response_model=QuestionListResponse, response_model_by_alias=True)
async def list_questions(
    category: str | None = None,
    store: QuestionStore = Depends(get_question_store),
):
    """List curated questions, optionally filtered by category."""
    items = await store.list_by_category(category)
    return QuestionListResponse(questions=[to_item_response(item) for item in items])


@router.post("/submit", response_model=SubmitResponse, response_model_by_alias=True)
async def submit_quiz(
    data: SubmitRequest,
    current_user: CurrentUser,
    engine: ScoringEngine = Depends(get_scoring_engine),
):
    """Score a submission and record it in the user's progress."""
    report = await engine.score(current_user.id, data.answers, data.category)
    return SubmitResponse(
        score=report.score,
        total_questions=report.total,
        percentage=report.percentage,
        results=[to_result_response(result) for result in report.results],
        recorded=report.recorded,
    )
