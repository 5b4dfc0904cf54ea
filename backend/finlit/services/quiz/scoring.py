"""
Scoring Engine

Resolves the expected answer of every submitted item and aggregates:
- generated items: the answer is decoded from the item id (no I/O)
- curated items: the answer is read from the question store; ids the
  store does not know are skipped and do not count towards the total

Credit is strict equality between the chosen and the correct index.
"""

import logging
import uuid

from finlit.core.errors import NotFound, StoreUnavailable
from finlit.services.progress import ProgressStore
from finlit.services.quiz.identity import GeneratedItemId, parse_item_id
from finlit.services.quiz.models import ScoredResult, ScoreReport
from finlit.services.quiz.question_store import QuestionStore

logger = logging.getLogger(__name__)


def percentage(score: int, total: int) -> int:
    if total == 0:
        return 0
    return round(score / total * 100)


class ScoringEngine:
    def __init__(self, questions: QuestionStore, progress: ProgressStore):
        self.questions = questions
        self.progress = progress

    async def resolve_correct_index(self, item_id: str) -> int | None:
        """Correct option index for an item, or None if it cannot be resolved."""
        parsed = parse_item_id(item_id)
        if isinstance(parsed, GeneratedItemId):
            return parsed.answer_index

        try:
            item = await self.questions.get(parsed.value)
        except NotFound:
            logger.warning("[Scoring] Skipping unknown question %s", item_id)
            return None
        return item.correct_option_index

    async def evaluate(self, submission: dict[str, int]) -> ScoreReport:
        """Score a submission without recording it."""
        results = []
        for item_id, chosen_index in submission.items():
            correct_index = await self.resolve_correct_index(item_id)
            if correct_index is None:
                continue
            results.append(
                ScoredResult(
                    item_id=item_id,
                    chosen_index=chosen_index,
                    correct_index=correct_index,
                    is_correct=chosen_index == correct_index,
                )
            )

        score = sum(1 for result in results if result.is_correct)
        total = len(results)
        return ScoreReport(
            results=results,
            score=score,
            total=total,
            percentage=percentage(score, total),
        )

    async def score(
        self,
        user_id: uuid.UUID,
        submission: dict[str, int],
        category: str,
    ) -> ScoreReport:
        """
        Score a submission and append it to the user's progress history.

        Args:
            user_id: The submitting user
            submission: Mapping of item id to chosen option index
            category: Quiz category the items belong to

        Returns:
            ScoreReport; `recorded` is False when history could not be saved.
            Feedback is returned either way.
        """
        report = await self.evaluate(submission)

        try:
            await self.progress.record(
                user_id=user_id,
                category=category,
                score=report.score,
                total=report.total,
                answers=[result.model_dump() for result in report.results],
            )
        except StoreUnavailable as e:
            logger.error(
                "[Scoring] Failed to save progress for user %s (%s %d/%d): %s",
                user_id, category, report.score, report.total, e,
            )
            report.recorded = False

        logger.info(
            "[Scoring] Quiz submitted - user=%s category=%s score=%d/%d",
            user_id, category, report.score, report.total,
        )
        return report
