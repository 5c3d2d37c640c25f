"""Unit tests for prompt construction and fallback policy."""

from unittest.mock import MagicMock

import pytest

from ragbot.core.domain import RetrievalResult, ScoredSegment, Segment
from ragbot.core.domain.exceptions import NoAnswerError
from ragbot.core.services.answer_composer import AnswerComposer
from ragbot.core.services.prompts import FALLBACK_ANSWER

pytestmark = pytest.mark.unit


def _result(question="How do I sleep better?", texts=("Keep a regular bedtime.",)):
    matches = [
        ScoredSegment(segment=Segment(text=text, source_id="sleep.txt", offset=i * 10), score=0.9 - i * 0.1)
        for i, text in enumerate(texts)
    ]
    return RetrievalResult(query=question, matches=matches)


@pytest.fixture
def llm():
    mock = MagicMock()
    mock.generate.return_value = "Go to bed at the same time every night."
    return mock


class TestBuildPrompt:
    def test_prompt_contains_context_and_question(self, llm):
        composer = AnswerComposer(llm)
        prompt = composer.build_prompt(_result(texts=("First.", "Second.")))

        assert "Context: First.\n\nSecond.\nQuestion: How do I sleep better?" in prompt
        assert prompt.rstrip().endswith("Answer:")
        assert FALLBACK_ANSWER in prompt

    def test_custom_template(self, llm):
        composer = AnswerComposer(llm, template="{question} | {context}")
        assert composer.build_prompt(_result(question="Q", texts=("C",))) == "Q | C"


class TestCompose:
    def test_grounded_answer(self, llm):
        answer = AnswerComposer(llm, temperature=0.0, max_tokens=256).compose(_result())

        assert answer.text == "Go to bed at the same time every night."
        assert answer.grounded
        assert len(answer.sources) == 1
        llm.generate.assert_called_once()
        assert llm.generate.call_args.kwargs == {"temperature": 0.0, "max_tokens": 256}

    def test_empty_retrieval_skips_model(self, llm):
        answer = AnswerComposer(llm).compose(RetrievalResult(query="anything"))

        assert answer.text == FALLBACK_ANSWER
        assert not answer.grounded
        assert answer.sources == []
        llm.generate.assert_not_called()

    @pytest.mark.parametrize(
        "reply",
        [
            "I don't have enough information to answer this question.",
            "I DON'T HAVE ENOUGH INFORMATION about that.",
            "Sorry, I don\u2019t have enough information to answer this question.",
            "I do not have enough information.",
        ],
    )
    def test_refusal_replaced_by_fallback(self, llm, reply):
        llm.generate.return_value = reply

        answer = AnswerComposer(llm).compose(_result())

        assert answer.text == FALLBACK_ANSWER
        assert not answer.grounded

    @pytest.mark.parametrize("reply", ["", "   \n"])
    def test_blank_completion_raises(self, llm, reply):
        llm.generate.return_value = reply

        with pytest.raises(NoAnswerError) as exc_info:
            AnswerComposer(llm).compose(_result())
        assert exc_info.value.message == FALLBACK_ANSWER

    def test_completion_whitespace_trimmed(self, llm):
        llm.generate.return_value = "  Keep it dark.\n"
        assert AnswerComposer(llm).compose(_result()).text == "Keep it dark."
