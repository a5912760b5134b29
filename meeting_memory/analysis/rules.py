"""Keyword tables driving classification and attribute estimation.

Every rule is plain data: a row qualifies for a rule when its lower-cased
text contains any of the listed keywords (substring containment, not word
matching), unless one of the rule's exclusions is also present.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

from meeting_memory.analysis.models import ImpactLevel, Priority, QuestionCategory

T = TypeVar("T")


@dataclass(frozen=True)
class KeywordRule:
    """Match when any keyword is present and no exclusion is."""

    keywords: tuple[str, ...]
    exclusions: tuple[str, ...] = ()

    def matches(self, lowered_text: str) -> bool:
        if not any(keyword in lowered_text for keyword in self.keywords):
            return False
        return not any(excluded in lowered_text for excluded in self.exclusions)


@dataclass(frozen=True)
class RuleSet:
    """An OR of keyword rules."""

    rules: tuple[KeywordRule, ...]

    def matches(self, text: str) -> bool:
        lowered = text.lower()
        return any(rule.matches(lowered) for rule in self.rules)


@dataclass(frozen=True)
class Tier(Generic[T]):
    """One level of an ordered classification ladder."""

    value: T
    rule: KeywordRule


@dataclass(frozen=True)
class TieredRule(Generic[T]):
    """Ordered tiers; the first matching tier wins, else *default*."""

    tiers: tuple[Tier[T], ...]
    default: T

    def classify(self, text: str) -> T:
        lowered = text.lower()
        for tier in self.tiers:
            if tier.rule.matches(lowered):
                return tier.value
        return self.default


class RecordKind(StrEnum):
    """Collections the classifier emits into."""

    ACTION_ITEM = "action_item"
    DECISION = "decision"
    QUESTION = "question"
    KEY_POINT = "key_point"


# ---------------------------------------------------------------------------
# Classification rule sets
# ---------------------------------------------------------------------------

ACTION_ITEM_RULES = RuleSet(
    rules=(
        KeywordRule(
            keywords=(
                "need to",
                "will do",
                "let's",
                "should",
                "follow up",
                "assigned to",
                "by tomorrow",
                "by next",
                "take care of",
            )
        ),
    ),
)

DECISION_RULES = RuleSet(
    rules=(
        KeywordRule(
            keywords=("decided", "agreed", "going with", "conclusion", "we'll", "final")
        ),
        KeywordRule(keywords=("plan",), exclusions=("planning",)),
    ),
)

QUESTION_RULES = RuleSet(
    rules=(KeywordRule(keywords=("?", "concerned", "worry", "issue", "problem")),),
)

KEY_POINT_RULES = RuleSet(
    rules=(KeywordRule(keywords=("important", "priority", "critical", "key")),),
)

CLASSIFICATION_RULES: dict[RecordKind, RuleSet] = {
    RecordKind.ACTION_ITEM: ACTION_ITEM_RULES,
    RecordKind.DECISION: DECISION_RULES,
    RecordKind.QUESTION: QUESTION_RULES,
    RecordKind.KEY_POINT: KEY_POINT_RULES,
}

# ---------------------------------------------------------------------------
# Attribute ladders
# ---------------------------------------------------------------------------

PRIORITY_TIERS: TieredRule[Priority] = TieredRule(
    tiers=(
        Tier(Priority.HIGH, KeywordRule(("urgent", "critical", "asap", "immediately"))),
        Tier(Priority.MEDIUM, KeywordRule(("soon", "next sprint", "important"))),
    ),
    default=Priority.NORMAL,
)

IMPACT_TIERS: TieredRule[ImpactLevel] = TieredRule(
    tiers=(
        Tier(ImpactLevel.HIGH, KeywordRule(("critical", "major", "significant"))),
        Tier(ImpactLevel.MEDIUM, KeywordRule(("important", "substantial"))),
    ),
    default=ImpactLevel.NORMAL,
)

CATEGORY_TIERS: TieredRule[QuestionCategory] = TieredRule(
    tiers=(
        Tier(QuestionCategory.BUG, KeywordRule(("bug", "issue", "fix", "problem"))),
        Tier(QuestionCategory.FEATURE, KeywordRule(("feature", "implement", "add"))),
        Tier(QuestionCategory.SCHEDULE, KeywordRule(("timeline", "deadline", "schedule"))),
    ),
    default=QuestionCategory.GENERAL,
)

# First-person commitments that make the speaker their own assignee
SELF_ASSIGNMENT_RULE = KeywordRule(("will take care", "i'll handle", "i will do"))

# Characters stripped from a question before picking out its significant words
QUESTION_PUNCTUATION = ".,?!;:"
SIGNIFICANT_WORD_MIN_LENGTH = 5
ADDRESSED_MIN_MATCHES = 2
