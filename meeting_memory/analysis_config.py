"""Analysis configuration: assignee matching policy and AnalysisConfig dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from meeting_memory.config import Settings


class AssigneeMatching(StrEnum):
    """How speaker names are located inside action-item text."""

    SUBSTRING = "substring"
    WORD_BOUNDARY = "word_boundary"


@dataclass(frozen=True)
class AnalysisConfig:
    """Immutable configuration for one analysis run.

    Defaults reproduce the reference behaviour: a five-row lookahead for
    question resolution, a 45 minute fallback duration and order-dependent
    substring matching of roster names.
    """

    lookahead_window: int = 5
    default_duration_minutes: int = 45
    assignee_matching: AssigneeMatching = AssigneeMatching.SUBSTRING

    @classmethod
    def from_settings(cls, settings: Settings) -> AnalysisConfig:
        return cls(
            lookahead_window=settings.lookahead_window,
            default_duration_minutes=settings.default_duration_minutes,
            assignee_matching=settings.assignee_matching,
        )
