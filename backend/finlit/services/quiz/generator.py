"""
Quiz Generator

generation prompt -> generative client -> extractor -> (fallback bank) ->
normalization -> identity encoding.

The generator always returns a non-empty, well-formed item set: a failed
or unreadable model call is answered from the fallback bank instead.
"""

import logging
import time
from datetime import datetime, timezone

from finlit.core.errors import GenerativeUnavailable
from finlit.services.llm.orchestrator import GenerativeClient
from finlit.services.prompt_composer import compose_generation_prompt
from finlit.services.quiz.extractor import extract_questions, normalize_question
from finlit.services.quiz.fallback import fallback_questions
from finlit.services.quiz.identity import encode, new_generated_id
from finlit.services.quiz.models import GeneratedQuiz, ItemOrigin, QuizItem

logger = logging.getLogger(__name__)

FALLBACK_SOURCE = "Pre-authored question bank"


def build_items(records: list[dict], category: str, timestamp_ms: int | None = None) -> list[QuizItem]:
    """Normalize records and give each an id that carries its answer."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)

    items = []
    for position, record in enumerate(records):
        normalized = normalize_question(record, position)
        item_id = new_generated_id(
            ordinal=position,
            answer_index=normalized["correctAnswer"],
            timestamp_ms=timestamp_ms,
        )
        items.append(
            QuizItem(
                id=encode(item_id),
                question=normalized["question"],
                options=normalized["options"],
                correct_option_index=normalized["correctAnswer"],
                category=category,
                explanation=normalized["explanation"],
                origin=ItemOrigin.GENERATED,
            )
        )
    return items


class QuizGenerator:
    """Generates quiz items for a category, falling back to the question bank."""

    def __init__(self, client: GenerativeClient):
        self.client = client

    async def _generate_records(self, category: str, count: int) -> list[dict] | None:
        prompt = compose_generation_prompt(category, count)
        try:
            raw = await self.client.complete(prompt, temperature=0.7)
        except GenerativeUnavailable as e:
            logger.error(
                "[Quiz] Generation failed (upstream status %s): %s", e.upstream_status, e
            )
            return None

        records = extract_questions(raw)
        if records is None:
            logger.warning("[Quiz] Unparsable model output, falling back to question bank")
            return None

        logger.info("[Quiz] Parsed %d generated questions", len(records))
        return records[:count]

    async def generate(self, category: str, count: int) -> GeneratedQuiz:
        """
        Produce `count` quiz items for a category.

        Args:
            category: Quiz topic, e.g. "UPI Safety"
            count: Requested number of items (>= 1)

        Returns:
            GeneratedQuiz with encoded item ids; `used_fallback` is set when
            the items came from the pre-authored bank
        """
        records = await self._generate_records(category, count)
        used_fallback = records is None
        if used_fallback:
            records = fallback_questions(category, count)
            source = FALLBACK_SOURCE
        else:
            source = self.client.display_name()

        items = build_items(records, category)
        logger.info(
            "[Quiz] Generated %d questions for %s (source=%s)", len(items), category, source
        )
        return GeneratedQuiz(
            items=items,
            category=category,
            generated_at=datetime.now(timezone.utc),
            source=source,
            used_fallback=used_fallback,
        )
