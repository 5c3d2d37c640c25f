"""LLM Port Interface."""

from abc import ABC, abstractmethod


class LLMPort(ABC):
    """Abstract interface for chat-completion providers."""

    @abstractmethod
    def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        temperature: float = 0.0,
        max_tokens: int = 1024,
    ) -> str:
        """Generate a completion for the prompt."""
        ...
