"""Tests for meeting statistics and participation metrics."""

from __future__ import annotations

import pytest

from meeting_memory.analysis.aggregator import (
    calculate_duration,
    count_by_speaker,
    meeting_stats,
    participation_metrics,
    word_count,
)
from meeting_memory.analysis.classifier import classify_rows
from meeting_memory.analysis.models import Classification
from meeting_memory.ingestion.models import TranscriptRow


class TestDuration:
    @pytest.mark.parametrize(
        ("start", "end", "expected"),
        [
            ("00:00", "00:45", 45),
            ("1:05", "2:10", 65),
            ("12:45:10", "13:00:00", 15),
            (" 0:10", "0:20", 10),
        ],
    )
    def test_parses_clock_values(self, start: str, end: str, expected: int) -> None:
        assert calculate_duration(start, end) == expected

    @pytest.mark.parametrize(
        ("start", "end"),
        [
            ("abc", "def"),
            ("10", "20"),
            ("", "00:10"),
            ("00:00", "xx:10"),
        ],
    )
    def test_falls_back_to_default(self, start: str, end: str) -> None:
        assert calculate_duration(start, end) == 45

    def test_custom_default(self) -> None:
        assert calculate_duration("abc", "def", default=30) == 30

    def test_fallback_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="meeting_memory.analysis.aggregator"):
            calculate_duration("abc", "def")
        assert "Could not parse timestamps" in caplog.text


class TestWordCount:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("hello world", 2),
            ("hello  world", 3),
            ("", 1),
            ("one", 1),
        ],
    )
    def test_single_space_split(self, text: str, expected: int) -> None:
        assert word_count(text) == expected


def _row(ts: str, speaker: str, text: str) -> TranscriptRow:
    return TranscriptRow(timestamp=ts, speaker=speaker, text=text)


class TestParticipation:
    def test_counts_per_speaker(self) -> None:
        rows = [
            _row("00:00", "Alice", "a b c"),
            _row("00:01", "Bob", "d"),
            _row("00:02", "Alice", "e f"),
        ]
        metrics = participation_metrics(rows, Classification())

        assert metrics.message_count_by_user == {"Alice": 2, "Bob": 1}
        assert metrics.word_count_by_user == {"Alice": 5, "Bob": 1}
        assert metrics.action_items_by_user == {}
        assert metrics.decisions_by_user == {}

    def test_record_tallies(self) -> None:
        rows = [
            _row("00:00", "Alice", "We need to ship"),
            _row("00:01", "Bob", "We decided to wait"),
            _row("00:02", "Alice", "Let's finalize it"),
        ]
        metrics = participation_metrics(rows, classify_rows(rows))

        assert metrics.action_items_by_user == {"Alice": 2}
        assert metrics.decisions_by_user == {"Bob": 1, "Alice": 1}

    def test_count_by_speaker_keeps_first_appearance_order(self) -> None:
        rows = [_row("0:00", "Zed", "x"), _row("0:01", "Amy", "y"), _row("0:02", "Zed", "z")]
        assert list(count_by_speaker(rows)) == ["Zed", "Amy"]


class TestMeetingStats:
    def test_empty_transcript(self) -> None:
        stats = meeting_stats([], Classification())

        assert stats.duration == 0
        assert stats.speaker_count == 0
        assert stats.total_messages == 0
        assert stats.action_item_ratio == 0.0
        assert stats.questions_addressed_ratio == 0.0

    def test_ratios(self) -> None:
        rows = [
            _row("00:00", "Alice", "Is the deployment pipeline stable?"),
            _row("00:05", "Bob", "Yes, the deployment pipeline is fine"),
            _row("00:10", "Alice", "We need to write docs"),
            _row("00:20", "Carol", "Any concerns?"),
        ]
        stats = meeting_stats(rows, classify_rows(rows))

        assert stats.duration == 20
        assert stats.speaker_count == 3
        assert stats.total_messages == 4
        assert stats.action_item_ratio == pytest.approx(0.25)
        # First question answered by row 1; the last one has no following rows
        assert stats.questions_addressed_ratio == pytest.approx(0.5)

    def test_no_questions_uses_denominator_floor(self) -> None:
        rows = [_row("00:00", "Alice", "Hello")]
        stats = meeting_stats(rows, classify_rows(rows))
        assert stats.questions_addressed_ratio == 0.0

    def test_unparseable_timestamps_use_default(self) -> None:
        rows = [_row("abc", "Alice", "Hello"), _row("def", "Bob", "Hi")]
        assert meeting_stats(rows, Classification()).duration == 45
        assert meeting_stats(rows, Classification(), default_duration=60).duration == 60

    def test_blank_timestamp_reads_as_clock_start(self) -> None:
        rows = [_row("", "Alice", "Hello"), _row("00:30", "Bob", "Hi")]
        assert meeting_stats(rows, Classification()).duration == 30
