"""Data models for analysis results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class Priority(StrEnum):
    """Urgency of an action item."""

    HIGH = "high"
    MEDIUM = "medium"
    NORMAL = "normal"


class ImpactLevel(StrEnum):
    """Severity of a decision."""

    HIGH = "high"
    MEDIUM = "medium"
    NORMAL = "normal"


class QuestionCategory(StrEnum):
    """Topic bucket of a question or concern."""

    BUG = "bug"
    FEATURE = "feature"
    SCHEDULE = "schedule"
    GENERAL = "general"


class SuggestionType(StrEnum):
    """Kind of advisory suggestion."""

    PROCESS = "process"
    ACTION = "action"
    FOLLOW_UP = "follow-up"


@dataclass(frozen=True)
class ActionItem:
    """A task-like statement detected in the transcript."""

    id: str
    text: str
    speaker: str
    timestamp: str
    priority: Priority
    assignee: str
    completed: bool = False
    row_index: int = -1  # -1 for items not sourced from a transcript row


@dataclass(frozen=True)
class Decision:
    """A conclusive statement detected in the transcript."""

    id: str
    text: str
    speaker: str
    timestamp: str
    impact_level: ImpactLevel
    row_index: int = -1


@dataclass(frozen=True)
class Question:
    """A question or concern, with whether later discussion picked it up."""

    id: str
    text: str
    speaker: str
    timestamp: str
    addressed: bool
    category: QuestionCategory
    row_index: int = -1


@dataclass(frozen=True)
class Suggestion:
    """Advisory entry produced by an insight generator."""

    id: str
    type: SuggestionType
    text: str
    reasoning: str


@dataclass(frozen=True)
class Reminder:
    """Follow-up reminder produced by an insight generator."""

    id: str
    text: str
    due_date: str
    assignee: str
    source: str


@dataclass(frozen=True)
class MeetingStats:
    """Meeting-level statistics, recomputed on every analysis run."""

    duration: int  # minutes
    speaker_count: int
    total_messages: int
    action_item_ratio: float  # 0.0 - 1.0
    questions_addressed_ratio: float  # 0.0 - 1.0


@dataclass(frozen=True)
class ParticipationMetrics:
    """Per-speaker tallies.

    The dicts are built fresh for every analysis run and belong to that run's
    result only; no two results share them. Being dicts, they make the
    enclosing :class:`AnalysisResult` unhashable.
    """

    message_count_by_user: dict[str, int] = field(default_factory=dict)
    word_count_by_user: dict[str, int] = field(default_factory=dict)
    action_items_by_user: dict[str, int] = field(default_factory=dict)
    decisions_by_user: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class Classification:
    """Raw output of the classifier: four row-ordered collections."""

    action_items: tuple[ActionItem, ...] = ()
    decisions: tuple[Decision, ...] = ()
    questions: tuple[Question, ...] = ()
    key_points: tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalysisResult:
    """The complete output bundle of one analysis run."""

    action_items: tuple[ActionItem, ...]
    decisions: tuple[Decision, ...]
    questions: tuple[Question, ...]
    key_points: tuple[str, ...]
    summary: str
    meeting_stats: MeetingStats
    participation_metrics: ParticipationMetrics
    ai_suggestions: tuple[Suggestion, ...] = ()
    follow_up_reminders: tuple[Reminder, ...] = ()
