"""Builds the grounded prompt and turns the model output into an answer."""

import logging

from ..domain import Answer, RetrievalResult
from ..domain.exceptions import NoAnswerError
from ..domain.utils import clean_text, normalize_apostrophes
from ..ports.llm_port import LLMPort
from .prompts import ANSWER_PROMPT, FALLBACK_ANSWER, REFUSAL_MARKERS

logger = logging.getLogger(__name__)


class AnswerComposer:
    """Stuffs retrieved segments into a prompt and calls the completion model.

    Substituting the fallback message is a policy, not an error: it happens
    when nothing was retrieved or the model says the context is not enough.
    Only an empty completion is reported as ``NoAnswerError``.
    """

    def __init__(
        self,
        llm: LLMPort,
        template: str = ANSWER_PROMPT,
        fallback: str = FALLBACK_ANSWER,
        refusal_markers: tuple[str, ...] = REFUSAL_MARKERS,
        temperature: float = 0.0,
        max_tokens: int = 1024,
    ) -> None:
        self.llm = llm
        self.template = template
        self.fallback = fallback
        self.refusal_markers = tuple(marker.lower() for marker in refusal_markers)
        self.temperature = temperature
        self.max_tokens = max_tokens

    def build_prompt(self, result: RetrievalResult) -> str:
        """Fill the template with the combined context and the question."""
        return self.template.format(context=result.get_combined_context(), question=result.query)

    def is_refusal(self, text: str) -> bool:
        """True if the model output says it cannot answer."""
        lowered = normalize_apostrophes(text).lower()
        return any(marker in lowered for marker in self.refusal_markers)

    def compose(self, result: RetrievalResult) -> Answer:
        """Produce the final answer for a retrieval result.

        Args:
            result: Retrieved segments and the question.

        Returns:
            Answer with the model text, or the fallback message.

        Raises:
            NoAnswerError: If the model returned no text at all.
        """
        if result.is_empty:
            logger.info("No context retrieved; returning fallback answer")
            return Answer(text=self.fallback, sources=[], grounded=False)

        prompt = self.build_prompt(result)
        completion = clean_text(
            self.llm.generate(prompt, temperature=self.temperature, max_tokens=self.max_tokens)
        ).strip()

        if not completion:
            raise NoAnswerError(self.fallback, context={"segments": len(result)})

        if self.is_refusal(completion):
            logger.info("Model could not answer from context; returning fallback answer")
            return Answer(text=self.fallback, sources=list(result.matches), grounded=False)

        return Answer(text=completion, sources=list(result.matches), grounded=True)
