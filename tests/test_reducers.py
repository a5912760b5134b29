"""Tests for post-analysis state transitions."""

from __future__ import annotations

import pytest

from meeting_memory.analysis.engine import analyze_transcript
from meeting_memory.analysis.models import AnalysisResult
from meeting_memory.analysis.reducers import (
    add_suggestion_to_action_items,
    dismiss_suggestion,
    toggle_action_item,
    toggle_question,
)
from meeting_memory.errors import RecordNotFoundError
from meeting_memory.ingestion.models import TranscriptRow


@pytest.fixture
def result() -> AnalysisResult:
    return analyze_transcript(
        [
            TranscriptRow("00:00", "PM", "Let's decide the sprint plan"),
            TranscriptRow("00:05", "Eng1", "I need to fix the login bug, it's critical"),
            TranscriptRow("00:10", "QA", "Is this tested? issue with timeouts"),
        ]
    )


class TestToggleActionItem:
    def test_flips_completed(self, result: AnalysisResult) -> None:
        updated = toggle_action_item(result, "action-1")

        assert updated.action_items[1].completed is True
        assert updated.action_items[0].completed is False
        assert toggle_action_item(updated, "action-1").action_items[1].completed is False

    def test_input_result_untouched(self, result: AnalysisResult) -> None:
        toggle_action_item(result, "action-0")
        assert result.action_items[0].completed is False

    def test_stats_not_recomputed(self, result: AnalysisResult) -> None:
        updated = toggle_action_item(result, "action-0")
        assert updated.meeting_stats == result.meeting_stats

    def test_unknown_id(self, result: AnalysisResult) -> None:
        with pytest.raises(RecordNotFoundError):
            toggle_action_item(result, "action-99")


class TestToggleQuestion:
    def test_flips_addressed(self, result: AnalysisResult) -> None:
        updated = toggle_question(result, "question-0")
        assert updated.questions[0].addressed is True

    def test_unknown_id_is_key_error(self, result: AnalysisResult) -> None:
        with pytest.raises(KeyError):
            toggle_question(result, "question-5")


class TestSuggestions:
    def test_dismiss(self, result: AnalysisResult) -> None:
        updated = dismiss_suggestion(result, "ai-suggestion-2")
        assert [s.id for s in updated.ai_suggestions] == ["ai-suggestion-1", "ai-suggestion-3"]

    def test_promote_to_action_item(self, result: AnalysisResult) -> None:
        suggestion = result.ai_suggestions[0]
        updated = add_suggestion_to_action_items(result, suggestion.id)

        assert len(updated.action_items) == 3
        item = updated.action_items[-1]
        assert item.id == "action-2"
        assert item.text == suggestion.text
        assert item.speaker == "AI Assistant"
        assert item.timestamp == "AI generated"
        assert item.priority == "medium"
        assert item.assignee == ""
        assert item.completed is False
        assert suggestion.id not in {s.id for s in updated.ai_suggestions}

    def test_promote_unknown(self, result: AnalysisResult) -> None:
        with pytest.raises(RecordNotFoundError):
            add_suggestion_to_action_items(result, "ai-suggestion-9")
