"""
Model Registry

Maps model IDs to their metadata and provider types.
Used by the generative client to select the correct provider per request.
"""

from finlit.core.config import Settings, get_settings
from finlit.core.errors import ValidationError
from finlit.services.llm.base import LLMProvider


# ── Model Registry ────────────────────────────────────────────────────────────
# Each entry maps a user-facing model_id to:
#   - display_name: Human-readable name for the frontend
#   - provider:     Which LLMProvider class to use
#   - api_model:    The actual model string sent to the provider API
#   - tier:         Pricing tier for frontend display

MODEL_REGISTRY: dict[str, dict] = {
    # ── OpenAI Chat Completions API ──
    "gpt-4o": {
        "display_name": "GPT-4o",
        "provider": "openai_chat",
        "api_model": "gpt-4o",
        "tier": "standard",
        "description": "Fast and reliable. Recommended default for quizzes and advice.",
    },
    "gpt-4o-mini": {
        "display_name": "GPT-4o Mini (Budget)",
        "provider": "openai_chat",
        "api_model": "gpt-4o-mini",
        "tier": "budget",
        "description": "Fastest and cheapest. Good enough for short answers.",
    },
    # ── OpenAI Responses API (GPT-5.x) ──
    "gpt-5-mini": {
        "display_name": "GPT-5 Mini",
        "provider": "openai_responses",
        "api_model": "gpt-5-mini",
        "tier": "standard",
        "description": "Stronger reasoning, slower responses.",
    },
    # ── IBM watsonx deployment ──
    "llama-3-3-70b-instruct": {
        "display_name": "Llama 3.3 70B (watsonx)",
        "provider": "watsonx",
        "api_model": "llama-3-3-70b-instruct",
        "tier": "standard",
        "description": "IBM watsonx AI service deployment.",
    },
}

# Default model when nothing else is specified
DEFAULT_MODEL_ID = "gpt-4o"


# ── Provider Factory ──────────────────────────────────────────────────────────

# Provider class registry (lazy-loaded singletons)
_provider_instances: dict[str, LLMProvider] = {}


def _create_provider(provider_type: str, settings: Settings) -> LLMProvider:
    """Create a provider instance by type string."""
    if provider_type == "openai_responses":
        from finlit.services.llm.openai_responses import OpenAIResponsesProvider
        return OpenAIResponsesProvider(settings)
    elif provider_type == "openai_chat":
        from finlit.services.llm.openai_chat import OpenAIChatProvider
        return OpenAIChatProvider(settings)
    elif provider_type == "watsonx":
        from finlit.services.llm.watsonx import WatsonxProvider
        return WatsonxProvider(settings)
    else:
        raise ValueError(f"Unknown provider type: {provider_type}")


def get_provider(model_id: str, settings: Settings | None = None) -> tuple[LLMProvider, str]:
    """
    Get the provider instance and API model name for a given model_id.

    Args:
        model_id: The user-facing model identifier (e.g., "gpt-4o")
        settings: Configuration handed to a newly created provider

    Returns:
        Tuple of (provider_instance, api_model_name)

    Raises:
        ValidationError: If the model_id is not in the registry
    """
    if model_id not in MODEL_REGISTRY:
        raise ValidationError(
            f"Unknown model: {model_id}. "
            f"Available models: {', '.join(MODEL_REGISTRY.keys())}"
        )

    model_info = MODEL_REGISTRY[model_id]
    provider_type = model_info["provider"]

    # Lazy singleton creation
    if provider_type not in _provider_instances:
        _provider_instances[provider_type] = _create_provider(
            provider_type, settings or get_settings()
        )

    return _provider_instances[provider_type], model_info["api_model"]


def list_models() -> list[dict]:
    """
    Return the list of available models for the frontend.

    Returns:
        List of dicts with id, display_name, tier, description
    """
    return [
        {
            "id": model_id,
            "display_name": info["display_name"],
            "tier": info["tier"],
            "description": info.get("description", ""),
        }
        for model_id, info in MODEL_REGISTRY.items()
    ]
