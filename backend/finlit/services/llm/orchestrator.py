"""
Generative Client

Single entry point for sending a composed prompt to a language model.

The client resolves the provider for the requested (or configured default)
model and returns the raw text untouched. It never parses, never retries:
parsing belongs to the answer extractor and every upstream failure surfaces
immediately as GenerativeUnavailable.
"""

import logging

from finlit.core.config import Settings, get_settings
from finlit.core.errors import GenerativeUnavailable
from finlit.services.llm.registry import MODEL_REGISTRY, get_provider

logger = logging.getLogger(__name__)


class GenerativeClient:
    """Sends prompts to the model registry's providers."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.default_model_id = settings.default_model

    def display_name(self, model_id: str | None = None) -> str:
        model_id = model_id or self.default_model_id
        info = MODEL_REGISTRY.get(model_id, {})
        return info.get("display_name", model_id)

    async def complete(
        self,
        prompt: str,
        model_id: str | None = None,
        temperature: float = 0.3,
    ) -> str:
        """
        Send a prompt to the specified (or default) model.

        Args:
            prompt: The composed prompt
            model_id: Optional model identifier; falls back to the configured default
            temperature: Sampling temperature

        Returns:
            Raw, untrusted response text ("" when the model returned nothing)

        Raises:
            GenerativeUnavailable: the upstream call failed, or the configured
                default model is not in the registry
            ValidationError: an explicitly requested model is not in the registry
        """
        if model_id is None:
            model_id = self.default_model_id
            if model_id not in MODEL_REGISTRY:
                logger.error("[LLM] Configured default model %s is not registered", model_id)
                raise GenerativeUnavailable(f"Default model {model_id} is not registered")
        provider, api_model = get_provider(model_id, self.settings)

        logger.info("[LLM] model=%s provider=%s", model_id, provider.provider_name)
        content = await provider.complete(
            prompt=prompt,
            model=api_model,
            temperature=temperature,
        )
        logger.debug("[LLM] Content: %s...", content[:200])
        return content


# ── Singleton ─────────────────────────────────────────────────────────────────

_client: GenerativeClient | None = None


def get_generative_client() -> GenerativeClient:
    """Get or create the generative client singleton."""
    global _client
    if _client is None:
        _client = GenerativeClient(get_settings())
    return _client
