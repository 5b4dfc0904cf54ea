"""
OpenAI Responses API Provider

Handles GPT-5.x models using the newer Responses API format:
- client.responses.create()
- input (not messages)
- response.output_text
"""

import openai
from openai import AsyncOpenAI

from finlit.core.config import Settings
from finlit.services.llm.base import LLMProvider
from finlit.services.llm.openai_chat import translate_openai_error


class OpenAIResponsesProvider(LLMProvider):
    """Provider for OpenAI Responses API (GPT-5.x models)."""

    provider_name = "openai_responses"

    def __init__(self, settings: Settings):
        super().__init__(settings)
        self.client = AsyncOpenAI(api_key=settings.openai_api_key, max_retries=0)

    async def complete(
        self,
        prompt: str,
        model: str,
        max_output_tokens: int = 2000,
        temperature: float = 0.3,
    ) -> str:
        # Reasoning models reject a temperature parameter, so it is not sent
        try:
            response = await self.client.responses.create(
                model=model,
                input=[{"role": "user", "content": prompt}],
                max_output_tokens=max_output_tokens,
            )
        except openai.OpenAIError as e:
            raise translate_openai_error(e) from e

        return response.output_text or ""
