"""Keyword intent routing for chat messages.

Kept apart from the retrieval pipeline: the router only decides whether a
message asks to take a note, to schedule something, or is a question.
"""

import logging
import re
from collections.abc import Iterable

from ..domain import Intent, IntentDecision, IntentRule

logger = logging.getLogger(__name__)

NOTE_PHRASES = [
    r"\btake (?:a )?notes?\b",
    r"\b(?:add|save|make|create|leave) (?:a )?notes?\b",
    r"\bnote (?:that|down)\b",
    r"\bwrite (?:this |that |it )?down\b",
    r"\bremember (?:that|this)\b",
]

SCHEDULE_PHRASES = [
    r"\bschedul(?:e|ing)\b",
    r"\bappointments?\b",
    r"\bbook (?:a|an|some)\b",
    r"\bmeeting\b",
    r"\bcalendar\b",
    r"\b(?:set up|arrange) (?:a )?(?:call|session|consultation)\b",
]


def default_rules() -> list[IntentRule]:
    """Note rules first, then scheduling rules."""
    return [IntentRule(pattern, Intent.TAKE_NOTE) for pattern in NOTE_PHRASES] + [
        IntentRule(pattern, Intent.SCHEDULE) for pattern in SCHEDULE_PHRASES
    ]


class IntentRouter:
    """Ordered {pattern -> intent} classifier; the first matching rule wins."""

    def __init__(
        self,
        rules: Iterable[IntentRule] | None = None,
        default: Intent = Intent.QUESTION,
        scheduling_link: str | None = None,
    ) -> None:
        """Initialize the router.

        Args:
            rules: Rules in priority order. Defaults to ``default_rules()``.
            default: Intent returned when no rule matches.
            scheduling_link: Static link returned for scheduling requests.
        """
        self.rules = list(rules) if rules is not None else default_rules()
        self.default = default
        self.scheduling_link = scheduling_link or None
        self._compiled = [(re.compile(rule.pattern, re.IGNORECASE), rule.intent) for rule in self.rules]

    def classify(self, text: str) -> Intent:
        """Return the intent of the first rule that matches ``text``."""
        if not text:
            return self.default
        for pattern, intent in self._compiled:
            if pattern.search(text):
                return intent
        return self.default

    def route(self, text: str) -> IntentDecision:
        """Classify ``text`` and attach the scheduling link when relevant."""
        intent = self.classify(text)
        logger.debug("Routed message to intent %s", intent.value)
        if intent is Intent.SCHEDULE:
            return IntentDecision(intent=intent, link=self.scheduling_link)
        return IntentDecision(intent=intent)
