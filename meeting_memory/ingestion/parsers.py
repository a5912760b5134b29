"""Transcript parsers for CSV and JSON row formats, plus the row normalizer."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from meeting_memory.errors import InvalidRowError, TranscriptFormatError
from meeting_memory.ingestion.models import TranscriptRow

REQUIRED_COLUMNS: tuple[str, ...] = ("timestamp", "speaker", "text")


def normalize_rows(raw_rows: Iterable[Mapping[str, Any]]) -> list[TranscriptRow]:
    """Convert raw row mappings into canonical :class:`TranscriptRow` records.

    A missing timestamp becomes an empty string (duration computation falls
    back on its own); a missing speaker or text is a hard failure.

    Raises:
        InvalidRowError: If a row is not an object or has no ``speaker`` or
            ``text`` value.
    """
    rows: list[TranscriptRow] = []
    for index, raw in enumerate(raw_rows):
        if not isinstance(raw, Mapping):
            raise InvalidRowError(index, "row", f"Row {index} is not an object")
        for field_name in ("speaker", "text"):
            if raw.get(field_name) is None:
                raise InvalidRowError(index, field_name)
        timestamp = raw.get("timestamp")
        rows.append(
            TranscriptRow(
                timestamp="" if timestamp is None else str(timestamp),
                speaker=str(raw["speaker"]),
                text=str(raw["text"]),
            )
        )
    return rows


def parse_csv(content: str) -> list[TranscriptRow]:
    """Parse a delimited transcript with a ``timestamp,speaker,text`` header.

    Header names are matched case-insensitively and blank lines are skipped.

    Raises:
        TranscriptFormatError: If the file has no data rows or misses a column.
    """
    reader = csv.DictReader(io.StringIO(content.lstrip("\ufeff")))
    header_fields = [f.strip() for f in reader.fieldnames or []]

    # Map canonical column -> header as it appears in the file
    columns: dict[str, str] = {}
    for required in REQUIRED_COLUMNS:
        for raw_field, field in zip(reader.fieldnames or [], header_fields):
            if field.lower() == required:
                columns[required] = raw_field
                break

    raw_rows: list[dict[str, Any]] = []
    for record in reader:
        if not any((value or "").strip() for value in record.values() if isinstance(value, str)):
            continue
        raw_rows.append({name: record.get(source) for name, source in columns.items()})

    if not raw_rows:
        raise TranscriptFormatError("The CSV file appears to be empty")

    missing = [col for col in REQUIRED_COLUMNS if col not in columns]
    if missing:
        msg = f"CSV is missing required columns: {', '.join(missing)}"
        raise TranscriptFormatError(msg)

    return normalize_rows(raw_rows)


def parse_json(content: str) -> list[TranscriptRow]:
    """Parse a JSON transcript.

    Supported formats::

        [{"timestamp": "00:01", "speaker": "PM", "text": "..."}]

        {"rows": [{"timestamp": "00:01", "speaker": "PM", "text": "..."}]}
    """
    data = json.loads(content)

    if isinstance(data, dict) and "rows" in data:
        data = data["rows"]
    if not isinstance(data, list):
        msg = "Unrecognized JSON transcript format: expected a list of rows"
        raise TranscriptFormatError(msg)
    if not data:
        raise TranscriptFormatError("The JSON transcript appears to be empty")

    return normalize_rows(data)


def parse_transcript(content: str, format: str) -> list[TranscriptRow]:
    """Dispatch to the correct parser based on *format*.

    Args:
        content: Raw transcript text.
        format: ``"csv"`` or ``"json"``.

    Returns:
        Normalized transcript rows in file order.

    Raises:
        ValueError: If *format* is not recognized.
    """
    dispatch: dict[str, Callable[[str], list[TranscriptRow]]] = {
        "csv": parse_csv,
        "json": parse_json,
    }

    parser = dispatch.get(format)
    if parser is None:
        msg = f"Unknown transcript format: {format!r}. Supported: {list(dispatch.keys())}"
        raise ValueError(msg)

    return parser(content)
