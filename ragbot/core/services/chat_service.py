"""Chat orchestration: validate the question, retrieve, compose."""

import logging

from ..domain import Answer
from ..domain.exceptions import EmptyQueryError, QueryTooLongError
from .answer_composer import AnswerComposer
from .retrieval_service import RetrievalService

logger = logging.getLogger(__name__)


class ChatService:
    """Answers user questions from the document corpus."""

    def __init__(
        self,
        retriever: RetrievalService,
        composer: AnswerComposer,
        max_question_length: int = 1000,
    ) -> None:
        """Initialize the chat service.

        Args:
            retriever: Retrieval over the knowledge base.
            composer: Prompting and fallback policy.
            max_question_length: Longest accepted question, in characters.
        """
        self.retriever = retriever
        self.composer = composer
        self.max_question_length = max_question_length

    def ask(self, question: str | None, top_k: int | None = None) -> Answer:
        """Answer a question.

        Args:
            question: The user's question.
            top_k: Optional override of the number of segments retrieved.

        Returns:
            Answer with text and the segments it was composed from.

        Raises:
            EmptyQueryError: If the question is missing or blank.
            QueryTooLongError: If the question exceeds the length limit.
            NoDocumentsLoadedError: If the corpus is empty.
            NoAnswerError: If the model returned nothing.
        """
        if not question or not question.strip():
            raise EmptyQueryError("Question is required")

        question = question.strip()
        if len(question) > self.max_question_length:
            raise QueryTooLongError(
                f"Question must be at most {self.max_question_length} characters",
                context={"length": len(question)},
            )

        logger.debug("Searching knowledge base...")
        result = self.retriever.retrieve(question, top_k=top_k)

        logger.debug("Generating response from %d segments...", len(result))
        return self.composer.compose(result)
