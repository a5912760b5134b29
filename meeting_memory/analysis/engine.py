"""End-to-end analysis: classify -> estimate -> aggregate -> insights."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from meeting_memory.analysis.aggregator import meeting_stats, participation_metrics
from meeting_memory.analysis.classifier import classify_rows
from meeting_memory.analysis.insights import (
    InsightGenerator,
    StaticInsightGenerator,
    build_summary,
)
from meeting_memory.analysis.models import AnalysisResult
from meeting_memory.analysis_config import AnalysisConfig
from meeting_memory.ingestion.models import TranscriptRow

logger = logging.getLogger(__name__)


def analyze_transcript(
    rows: Sequence[TranscriptRow],
    config: AnalysisConfig | None = None,
    insight_generator: InsightGenerator | None = None,
) -> AnalysisResult:
    """Run the full analysis over an ordered transcript.

    The run is a pure function of *rows*: no state is kept between calls and
    the same input always produces an equal result.

    Args:
        rows: Normalized transcript rows in file order.
        config: Analysis tuning; defaults to :class:`AnalysisConfig`.
        insight_generator: Source of suggestions and reminders; defaults to
            :class:`StaticInsightGenerator`.

    Returns:
        The complete :class:`AnalysisResult` bundle.

    Raises:
        InvalidRowError: If a row has no speaker or text.
    """
    config = config or AnalysisConfig()
    insight_generator = insight_generator or StaticInsightGenerator()

    # 1. Classify (estimators run per extracted record)
    classification = classify_rows(rows, config)

    # 2. Aggregate
    stats = meeting_stats(rows, classification, config.default_duration_minutes)
    participation = participation_metrics(rows, classification)

    result = AnalysisResult(
        action_items=classification.action_items,
        decisions=classification.decisions,
        questions=classification.questions,
        key_points=classification.key_points,
        summary=build_summary(
            stats,
            action_items=len(classification.action_items),
            decisions=len(classification.decisions),
            questions=len(classification.questions),
        ),
        meeting_stats=stats,
        participation_metrics=participation,
    )

    # 3. Insights
    result = replace(
        result,
        ai_suggestions=tuple(insight_generator.generate_insights(result)),
        follow_up_reminders=tuple(insight_generator.generate_reminders(result)),
    )

    logger.info(
        "Analyzed %d rows: %d action items, %d decisions, %d questions",
        len(rows),
        len(result.action_items),
        len(result.decisions),
        len(result.questions),
    )
    return result
