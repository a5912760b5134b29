"""Attribute estimators: priority, impact, category, assignee and resolution."""

from __future__ import annotations

import re
from collections.abc import Sequence

from meeting_memory.analysis.models import ImpactLevel, Priority, QuestionCategory
from meeting_memory.analysis.rules import (
    ADDRESSED_MIN_MATCHES,
    CATEGORY_TIERS,
    IMPACT_TIERS,
    PRIORITY_TIERS,
    QUESTION_PUNCTUATION,
    SELF_ASSIGNMENT_RULE,
    SIGNIFICANT_WORD_MIN_LENGTH,
)
from meeting_memory.analysis_config import AssigneeMatching
from meeting_memory.ingestion.models import TranscriptRow

_PUNCTUATION_TABLE = str.maketrans("", "", QUESTION_PUNCTUATION)


def estimate_priority(text: str) -> Priority:
    """Classify an action item as high, medium or normal priority."""
    return PRIORITY_TIERS.classify(text)


def estimate_impact(text: str) -> ImpactLevel:
    """Classify a decision as high, medium or normal impact."""
    return IMPACT_TIERS.classify(text)


def categorize_question(text: str) -> QuestionCategory:
    """Bucket a question; bug beats feature beats schedule."""
    return CATEGORY_TIERS.classify(text)


def speaker_roster(rows: Sequence[TranscriptRow]) -> list[str]:
    """Distinct speakers in order of first appearance."""
    return list(dict.fromkeys(row.speaker for row in rows))


def _mentions(name: str, lowered_text: str, matching: AssigneeMatching) -> bool:
    lowered_name = name.lower()
    if not lowered_name.strip():
        return False
    if matching is AssigneeMatching.WORD_BOUNDARY:
        pattern = rf"(?<!\w){re.escape(lowered_name)}(?!\w)"
        return re.search(pattern, lowered_text) is not None
    return lowered_name in lowered_text


def infer_assignee(
    text: str,
    speaker: str,
    roster: Sequence[str],
    matching: AssigneeMatching = AssigneeMatching.SUBSTRING,
) -> str:
    """Work out who owns an action item.

    A first-person commitment ("I'll handle it") assigns the speaker. Otherwise
    the first roster name mentioned in the text wins, so with substring
    matching a short name that is contained in a longer one ("Al" / "Alice")
    is resolved purely by roster order. Falls back to the speaker.

    Args:
        text: The action item's source text.
        speaker: Who said it.
        roster: Distinct speakers in order of first appearance.
        matching: Substring (default) or word-boundary name matching.
    """
    lowered = text.lower()
    if SELF_ASSIGNMENT_RULE.matches(lowered):
        return speaker

    for name in roster:
        if _mentions(name, lowered, matching):
            return name

    return speaker


def significant_words(text: str) -> list[str]:
    """Lower-cased words of a question longer than four characters, punctuation stripped."""
    cleaned = text.lower().translate(_PUNCTUATION_TABLE)
    return [word for word in cleaned.split() if len(word) >= SIGNIFICANT_WORD_MIN_LENGTH]


def is_addressed(
    question_text: str,
    rows: Sequence[TranscriptRow],
    row_index: int,
    window: int = 5,
) -> bool:
    """Check whether a question is picked up in the rows that follow it.

    Only the *window* rows strictly after *row_index* are examined. A row
    answers the question when its text contains at least
    ``min(2, len(significant_words))`` of the question's significant words.
    A question with no significant words is therefore answered by any
    following row.
    """
    words = significant_words(question_text)
    required = min(ADDRESSED_MIN_MATCHES, len(words))

    for row in rows[row_index + 1 : row_index + 1 + window]:
        response = row.text.lower()
        matching = [word for word in words if word in response]
        if len(matching) >= required:
            return True

    return False
