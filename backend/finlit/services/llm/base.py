"""
Abstract base class for all LLM providers.

Each provider implements the API-specific translation layer and maps
upstream failures to GenerativeUnavailable. Parsing of the returned text
is never done here: callers treat it as untrusted.
"""

from abc import ABC, abstractmethod

from finlit.core.config import Settings


class LLMProvider(ABC):
    """Abstract base class for all LLM providers."""

    provider_name: str = "base"

    def __init__(self, settings: Settings):
        self.settings = settings

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        model: str,
        max_output_tokens: int = 2000,
        temperature: float = 0.3,
    ) -> str:
        """
        Send a single user prompt to the LLM and return its raw text.

        Args:
            prompt: The composed prompt
            model: The API model identifier (e.g., "gpt-4o")
            max_output_tokens: Maximum tokens in the response
            temperature: Sampling temperature

        Returns:
            Raw text response, or "" when the upstream returned no content

        Raises:
            GenerativeUnavailable: non-success response or transport failure
        """
        ...
