"""
Port interfaces for text generation.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator


class TextGenerator(ABC):
    """Port for an LLM that completes prompts."""

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """Return the full completion for a prompt."""
        raise NotImplementedError

    @abstractmethod
    def stream(self, prompt: str) -> AsyncIterator[str]:
        """Yield partial completions as they arrive."""
        raise NotImplementedError
