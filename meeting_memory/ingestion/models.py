"""Data models for transcript intake."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TranscriptRow:
    """One speaker utterance with its clock timestamp."""

    timestamp: str
    speaker: str
    text: str
