"""Pydantic request/response schemas for the Meeting Memory API."""

from __future__ import annotations

from pydantic import BaseModel

from meeting_memory.analysis.models import (
    ImpactLevel,
    Priority,
    QuestionCategory,
    SuggestionType,
)


class TranscriptRowIn(BaseModel):
    """A single transcript row in a request body."""

    timestamp: str = ""
    speaker: str
    text: str


class AnalyzeRequest(BaseModel):
    """Request body for the /api/analyze endpoint."""

    rows: list[TranscriptRowIn]


class ActionItemResponse(BaseModel):
    id: str
    text: str
    speaker: str
    timestamp: str
    completed: bool = False
    priority: Priority
    assignee: str
    row_index: int


class DecisionResponse(BaseModel):
    id: str
    text: str
    speaker: str
    timestamp: str
    impact_level: ImpactLevel
    row_index: int


class QuestionResponse(BaseModel):
    id: str
    text: str
    speaker: str
    timestamp: str
    addressed: bool
    category: QuestionCategory
    row_index: int


class SuggestionResponse(BaseModel):
    id: str
    type: SuggestionType
    text: str
    reasoning: str


class ReminderResponse(BaseModel):
    id: str
    text: str
    due_date: str
    assignee: str
    source: str


class MeetingStatsResponse(BaseModel):
    """Meeting-level statistics."""

    duration: int
    speaker_count: int
    total_messages: int
    action_item_ratio: float
    questions_addressed_ratio: float


class ParticipationMetricsResponse(BaseModel):
    """Per-speaker tallies."""

    message_count_by_user: dict[str, int] = {}
    word_count_by_user: dict[str, int] = {}
    action_items_by_user: dict[str, int] = {}
    decisions_by_user: dict[str, int] = {}


class AnalysisResponse(BaseModel):
    """Response body for the analyze endpoints."""

    action_items: list[ActionItemResponse] = []
    decisions: list[DecisionResponse] = []
    questions: list[QuestionResponse] = []
    key_points: list[str] = []
    summary: str
    ai_suggestions: list[SuggestionResponse] = []
    meeting_stats: MeetingStatsResponse
    participation_metrics: ParticipationMetricsResponse
    follow_up_reminders: list[ReminderResponse] = []
