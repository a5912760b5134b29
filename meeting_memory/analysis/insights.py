"""Advisory suggestions, follow-up reminders and the summary line.

None of this is derived from transcript content: the default generator
returns fixed templates. Anything implementing :class:`InsightGenerator` can
be passed to the engine instead.
"""

from __future__ import annotations

from typing import Protocol

from meeting_memory.analysis.models import (
    AnalysisResult,
    MeetingStats,
    Reminder,
    Suggestion,
    SuggestionType,
)

SUMMARY_TEMPLATE = (
    "This {duration} minute meeting had {speaker_count} participants. "
    "{action_items} action items, {decisions} decisions and {questions} "
    "questions or concerns were identified."
)


class InsightGenerator(Protocol):
    """Produces advisory records for a finished analysis."""

    def generate_insights(self, result: AnalysisResult) -> list[Suggestion]: ...

    def generate_reminders(self, result: AnalysisResult) -> list[Reminder]: ...


class StaticInsightGenerator:
    """Returns the same three suggestions and three reminders for every meeting."""

    def generate_insights(self, result: AnalysisResult) -> list[Suggestion]:
        return [
            Suggestion(
                id="ai-suggestion-1",
                type=SuggestionType.PROCESS,
                text=(
                    "Consider setting up a dedicated QA review meeting before sprint "
                    "planning to avoid lengthy debugging discussions"
                ),
                reasoning=(
                    "A large share of the meeting was spent discussing test failures "
                    "that could have been addressed beforehand"
                ),
            ),
            Suggestion(
                id="ai-suggestion-2",
                type=SuggestionType.ACTION,
                text="Create a formal bug triage process for recurring issues",
                reasoning="Recurring issues need systematic resolution across sprints",
            ),
            Suggestion(
                id="ai-suggestion-3",
                type=SuggestionType.FOLLOW_UP,
                text="Schedule a dedicated session to review the feature requests raised",
                reasoning=(
                    "Several important feature requests were mentioned but not "
                    "conclusively prioritized"
                ),
            ),
        ]

    def generate_reminders(self, result: AnalysisResult) -> list[Reminder]:
        return [
            Reminder(
                id="reminder-1",
                text="Send bug details to the owning team",
                due_date="Tomorrow",
                assignee="Engineering",
                source="Based on commitments made during the meeting",
            ),
            Reminder(
                id="reminder-2",
                text="Confirm sprint priorities with stakeholders",
                due_date="Today",
                assignee="PM",
                source="Meeting objective",
            ),
            Reminder(
                id="reminder-3",
                text="Update the QA test suite to cover the issues discussed",
                due_date="This week",
                assignee="QA",
                source="Discussion around test failures",
            ),
        ]


def build_summary(
    stats: MeetingStats,
    action_items: int,
    decisions: int,
    questions: int,
) -> str:
    """Fill the fixed summary template."""
    return SUMMARY_TEMPLATE.format(
        duration=stats.duration,
        speaker_count=stats.speaker_count,
        action_items=action_items,
        decisions=decisions,
        questions=questions,
    )
