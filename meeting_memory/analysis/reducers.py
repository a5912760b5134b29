"""State transitions applied to a finished analysis by a presentation layer.

Each reducer returns a new :class:`AnalysisResult`; transcript rows are never
re-classified and meeting statistics are left as computed.
"""

from __future__ import annotations

from dataclasses import replace

from meeting_memory.analysis.models import ActionItem, AnalysisResult, Priority
from meeting_memory.errors import RecordNotFoundError

AI_ASSISTANT_SPEAKER = "AI Assistant"
AI_GENERATED_TIMESTAMP = "AI generated"


def toggle_action_item(result: AnalysisResult, item_id: str) -> AnalysisResult:
    """Flip ``completed`` on the action item with *item_id*."""
    if not any(item.id == item_id for item in result.action_items):
        raise RecordNotFoundError(item_id)
    return replace(
        result,
        action_items=tuple(
            replace(item, completed=not item.completed) if item.id == item_id else item
            for item in result.action_items
        ),
    )


def toggle_question(result: AnalysisResult, question_id: str) -> AnalysisResult:
    """Flip ``addressed`` on the question with *question_id*."""
    if not any(question.id == question_id for question in result.questions):
        raise RecordNotFoundError(question_id)
    return replace(
        result,
        questions=tuple(
            replace(q, addressed=not q.addressed) if q.id == question_id else q
            for q in result.questions
        ),
    )


def dismiss_suggestion(result: AnalysisResult, suggestion_id: str) -> AnalysisResult:
    """Drop a suggestion from the bundle."""
    if not any(s.id == suggestion_id for s in result.ai_suggestions):
        raise RecordNotFoundError(suggestion_id)
    return replace(
        result,
        ai_suggestions=tuple(s for s in result.ai_suggestions if s.id != suggestion_id),
    )


def add_suggestion_to_action_items(result: AnalysisResult, suggestion_id: str) -> AnalysisResult:
    """Promote a suggestion to an unassigned medium-priority action item."""
    suggestion = next((s for s in result.ai_suggestions if s.id == suggestion_id), None)
    if suggestion is None:
        raise RecordNotFoundError(suggestion_id)

    item = ActionItem(
        id=f"action-{len(result.action_items)}",
        text=suggestion.text,
        speaker=AI_ASSISTANT_SPEAKER,
        timestamp=AI_GENERATED_TIMESTAMP,
        priority=Priority.MEDIUM,
        assignee="",
    )
    return replace(
        dismiss_suggestion(result, suggestion_id),
        action_items=(*result.action_items, item),
    )
