"""Google Gemini chat-completion adapter using the google-genai SDK."""

import logging
from typing import TYPE_CHECKING

from ....common.rate_limiter import RateLimiter
from ....core.domain.exceptions import (
    LLMConnectionError,
    LLMGenerationError,
    LLMRateLimitError,
    MissingAPIKeyError,
)
from ....core.domain.utils import clean_text
from ....core.ports.llm_port import LLMPort

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)


class GeminiAdapter(LLMPort):
    """Client for Gemini text generation."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        timeout: float = 30.0,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        """Initialize the Gemini adapter.

        Args:
            api_key: Google AI API key.
            model: Model to use.
            timeout: Request timeout in seconds.
            rate_limiter: Optional per-minute request limiter.
        """
        self.api_key = api_key
        self.model_name = model
        self.timeout = timeout
        self.rate_limiter = rate_limiter or RateLimiter(None)
        self._client = None

    def _get_client(self) -> "genai.Client":
        """Lazy load the Gemini client."""
        if self._client is None:
            if not self.api_key:
                raise MissingAPIKeyError(
                    "Google API key not set. Set GOOGLE_API_KEY in your environment or .env file."
                )

            from google import genai
            from google.genai import types

            self._client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(timeout=int(self.timeout * 1000)),
            )
            logger.info("Gemini client initialized for model: %s", self.model_name)

        return self._client

    def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        temperature: float = 0.0,
        max_tokens: int = 1024,
    ) -> str:
        """Generate a response from the model.

        Args:
            prompt: Full user prompt.
            system_prompt: Optional system instructions.
            temperature: Sampling temperature (0.0-1.0).
            max_tokens: Maximum tokens to generate.

        Returns:
            Generated text, or an empty string if the model returned no
            candidates (e.g. blocked by safety filters).

        Raises:
            LLMRateLimitError: On HTTP 429 / quota errors.
            LLMGenerationError: When the provider rejects the request.
            LLMConnectionError: On timeouts, network or server errors.
        """
        from google.genai import errors
        from google.genai.types import GenerateContentConfig

        client = self._get_client()
        self.rate_limiter.acquire()

        context = {"model": self.model_name}
        try:
            response = client.models.generate_content(
                model=self.model_name,
                contents=clean_text(prompt),
                config=GenerateContentConfig(
                    system_instruction=system_prompt,
                    temperature=temperature,
                    max_output_tokens=max_tokens,
                ),
            )
        except errors.ClientError as e:
            if e.code == 429:
                raise LLMRateLimitError(
                    "Completion rate limit exceeded", cause=e, context=context
                ) from e
            raise LLMGenerationError(
                "Completion request was rejected", cause=e, context={**context, "status": e.code}
            ) from e
        except errors.APIError as e:
            raise LLMConnectionError(
                "Completion service error", cause=e, context={**context, "status": e.code}
            ) from e
        except Exception as e:
            raise LLMConnectionError(
                "Could not reach the completion service", cause=e, context=context
            ) from e

        if not response.candidates:
            logger.warning("Completion returned no candidates")
            return ""

        return clean_text(response.text or "")
