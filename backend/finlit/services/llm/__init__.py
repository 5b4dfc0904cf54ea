"""
LLM Provider Abstraction Layer

Provides a unified interface for multiple LLM providers (OpenAI, IBM watsonx)
with a model registry and a single generative client.
"""

from finlit.services.llm.orchestrator import GenerativeClient, get_generative_client
from finlit.services.llm.registry import MODEL_REGISTRY, get_provider, list_models

__all__ = [
    "GenerativeClient",
    "get_generative_client",
    "MODEL_REGISTRY",
    "get_provider",
    "list_models",
]
