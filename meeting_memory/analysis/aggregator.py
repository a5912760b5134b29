"""Meeting statistics and per-speaker participation metrics."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Protocol

from meeting_memory.analysis.models import (
    Classification,
    MeetingStats,
    ParticipationMetrics,
)
from meeting_memory.ingestion.models import TranscriptRow

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MINUTES = 45
EMPTY_TIMESTAMP = "00:00"


class _HasSpeaker(Protocol):
    @property
    def speaker(self) -> str: ...


def _clock_minutes(timestamp: str) -> int:
    """Convert ``"H:MM"`` (or ``"M:SS"``) into a count of the larger unit.

    Only the first two fields are used; ``"1:30:15"`` reads as 90.
    """
    parts = timestamp.split(":")
    return int(parts[0]) * 60 + int(parts[1])


def calculate_duration(
    start: str,
    end: str,
    default: int = DEFAULT_DURATION_MINUTES,
) -> int:
    """Minutes between two clock timestamps, or *default* if either is unparseable."""
    try:
        return _clock_minutes(end) - _clock_minutes(start)
    except (ValueError, IndexError, AttributeError):
        logger.warning(
            "Could not parse timestamps %r / %r; using %d minute default", start, end, default
        )
        return default


def count_by_speaker(items: Iterable[_HasSpeaker]) -> dict[str, int]:
    """Tally records by their ``speaker`` field, in order of first appearance."""
    return dict(Counter(item.speaker for item in items))


def word_count(text: str) -> int:
    """Number of single-space separated tokens; runs of spaces inflate the count."""
    return len(text.split(" "))


def participation_metrics(
    rows: Sequence[TranscriptRow],
    classification: Classification,
) -> ParticipationMetrics:
    """Messages, words, action items and decisions per speaker.

    Every call returns new dicts, so callers never share a mapping between runs.
    """
    words: dict[str, int] = {}
    for row in rows:
        words[row.speaker] = words.get(row.speaker, 0) + word_count(row.text)

    return ParticipationMetrics(
        message_count_by_user=count_by_speaker(rows),
        word_count_by_user=words,
        action_items_by_user=count_by_speaker(classification.action_items),
        decisions_by_user=count_by_speaker(classification.decisions),
    )


def meeting_stats(
    rows: Sequence[TranscriptRow],
    classification: Classification,
    default_duration: int = DEFAULT_DURATION_MINUTES,
) -> MeetingStats:
    """Duration, head count and the action-item / addressed-question ratios.

    Both ratios are 0 for an empty transcript.
    """
    # Blank or missing endpoints read as the start of the clock
    start = (rows[0].timestamp if rows else "") or EMPTY_TIMESTAMP
    end = (rows[-1].timestamp if rows else "") or EMPTY_TIMESTAMP
    total = len(rows)

    addressed = sum(1 for question in classification.questions if question.addressed)

    return MeetingStats(
        duration=calculate_duration(start, end, default_duration),
        speaker_count=len({row.speaker for row in rows}),
        total_messages=total,
        action_item_ratio=len(classification.action_items) / total if total else 0.0,
        questions_addressed_ratio=addressed / max(len(classification.questions), 1),
    )
