"""Rule-based classification of transcript rows into tagged records."""

from __future__ import annotations

from collections.abc import Sequence

from meeting_memory.analysis.estimators import (
    categorize_question,
    estimate_impact,
    estimate_priority,
    infer_assignee,
    is_addressed,
    speaker_roster,
)
from meeting_memory.analysis.models import ActionItem, Classification, Decision, Question
from meeting_memory.analysis.rules import CLASSIFICATION_RULES, RecordKind, RuleSet
from meeting_memory.analysis_config import AnalysisConfig
from meeting_memory.errors import InvalidRowError
from meeting_memory.ingestion.models import TranscriptRow


def matching_kinds(
    text: str,
    rules: dict[RecordKind, RuleSet] = CLASSIFICATION_RULES,
) -> list[RecordKind]:
    """Every record kind whose rule set matches *text*.

    Rule sets are independent: a single row may be an action item, a decision
    and a question at once.
    """
    return [kind for kind, rule_set in rules.items() if rule_set.matches(text)]


def _validate(rows: Sequence[TranscriptRow]) -> None:
    for index, row in enumerate(rows):
        if not isinstance(row.speaker, str):
            raise InvalidRowError(index, "speaker")
        if not isinstance(row.text, str):
            raise InvalidRowError(index, "text")


def classify_rows(
    rows: Sequence[TranscriptRow],
    config: AnalysisConfig | None = None,
) -> Classification:
    """Scan rows in order and emit action items, decisions, questions and key points.

    Args:
        rows: Transcript rows in file order.
        config: Lookahead window and assignee matching policy.

    Returns:
        A :class:`Classification` whose collections preserve row order.

    Raises:
        InvalidRowError: If a row has no speaker or text.
    """
    config = config or AnalysisConfig()
    _validate(rows)
    roster = speaker_roster(rows)

    action_items: list[ActionItem] = []
    decisions: list[Decision] = []
    questions: list[Question] = []
    key_points: list[str] = []

    for index, row in enumerate(rows):
        kinds = matching_kinds(row.text)

        if RecordKind.ACTION_ITEM in kinds:
            action_items.append(
                ActionItem(
                    id=f"action-{len(action_items)}",
                    text=row.text,
                    speaker=row.speaker,
                    timestamp=row.timestamp,
                    priority=estimate_priority(row.text),
                    assignee=infer_assignee(
                        row.text, row.speaker, roster, config.assignee_matching
                    ),
                    row_index=index,
                )
            )

        if RecordKind.DECISION in kinds:
            decisions.append(
                Decision(
                    id=f"decision-{len(decisions)}",
                    text=row.text,
                    speaker=row.speaker,
                    timestamp=row.timestamp,
                    impact_level=estimate_impact(row.text),
                    row_index=index,
                )
            )

        if RecordKind.QUESTION in kinds:
            questions.append(
                Question(
                    id=f"question-{len(questions)}",
                    text=row.text,
                    speaker=row.speaker,
                    timestamp=row.timestamp,
                    addressed=is_addressed(row.text, rows, index, config.lookahead_window),
                    category=categorize_question(row.text),
                    row_index=index,
                )
            )

        if RecordKind.KEY_POINT in kinds:
            key_points.append(f"{row.speaker}: {row.text}")

    return Classification(
        action_items=tuple(action_items),
        decisions=tuple(decisions),
        questions=tuple(questions),
        key_points=tuple(key_points),
    )
