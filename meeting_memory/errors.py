"""Typed failures raised by intake, the analysis engine and the reducers."""

from __future__ import annotations


class TranscriptFormatError(ValueError):
    """The transcript file is empty or lacks a required column."""


class InvalidRowError(ValueError):
    """A transcript row is not an object or is missing its speaker or text."""

    def __init__(self, row_index: int, field_name: str, message: str | None = None) -> None:
        self.row_index = row_index
        self.field_name = field_name
        super().__init__(
            message or f"Row {row_index} is missing required field {field_name!r}"
        )


class RecordNotFoundError(KeyError):
    """No extracted record or suggestion carries the requested id."""
