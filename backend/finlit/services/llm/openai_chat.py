"""
OpenAI Chat Completions API Provider

Handles GPT-4o, GPT-4o-mini, and other Chat Completions API models:
- client.chat.completions.create()
- messages (not input)
- response.choices[0].message.content
"""

import openai
from openai import AsyncOpenAI

from finlit.core.config import Settings
from finlit.core.errors import GenerativeUnavailable
from finlit.services.llm.base import LLMProvider


def translate_openai_error(error: openai.OpenAIError) -> GenerativeUnavailable:
    """Map an SDK failure to GenerativeUnavailable, keeping the upstream status."""
    upstream_status = getattr(error, "status_code", None)
    return GenerativeUnavailable(
        f"OpenAI request failed: {error}", upstream_status=upstream_status
    )


class OpenAIChatProvider(LLMProvider):
    """Provider for OpenAI Chat Completions API (GPT-4o, GPT-4o-mini, etc.)."""

    provider_name = "openai_chat"

    def __init__(self, settings: Settings):
        super().__init__(settings)
        # One request per call: the SDK would otherwise retry on its own
        self.client = AsyncOpenAI(api_key=settings.openai_api_key, max_retries=0)

    async def complete(
        self,
        prompt: str,
        model: str,
        max_output_tokens: int = 2000,
        temperature: float = 0.3,
    ) -> str:
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[
                    {
                        "role": "user",
                        "content": prompt,
                    },
                ],
                max_completion_tokens=max_output_tokens,
                temperature=temperature,
            )
        except openai.OpenAIError as e:
            raise translate_openai_error(e) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
