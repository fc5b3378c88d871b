"""LLM clients used by the generative notification strategy."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from openai import OpenAI

logger = logging.getLogger(__name__)


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    def complete(self, prompt: str, max_tokens: int, temperature: float) -> str:
        """
        Complete a prompt using the LLM.

        Args:
            prompt: The prompt to send to the LLM.
            max_tokens: Maximum number of tokens in the response.
            temperature: Sampling temperature (0.0-1.0).

        Returns:
            The LLM's response text (trimmed).
        """


class OpenAILLMClient(LLMClient):
    """OpenAI (or OpenAI-compatible) chat completions client."""

    def __init__(self, api_key: str, model: str, base_url: Optional[str] = None, timeout: float = 30.0):
        self.model = model
        self.client = OpenAI(
            api_key=api_key,
            base_url=base_url if base_url else None,
            timeout=timeout,
            max_retries=0,
        )

    def complete(self, prompt: str, max_tokens: int, temperature: float) -> str:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                max_tokens=max_tokens,
                response_format={"type": "json_object"},
            )
            return (response.choices[0].message.content or "").strip()
        except Exception as e:
            logger.error(f"OpenAI API error: {e}")
            raise
