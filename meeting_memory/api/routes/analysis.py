"""Analysis endpoints: run the rule-based engine over a transcript."""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, File, HTTPException, UploadFile

from meeting_memory.analysis.engine import analyze_transcript
from meeting_memory.analysis.models import AnalysisResult
from meeting_memory.analysis_config import AnalysisConfig
from meeting_memory.api.models import AnalysisResponse, AnalyzeRequest
from meeting_memory.config import settings
from meeting_memory.errors import InvalidRowError, TranscriptFormatError
from meeting_memory.ingestion.models import TranscriptRow
from meeting_memory.ingestion.parsers import parse_csv

router = APIRouter()


def _to_response(result: AnalysisResult) -> AnalysisResponse:
    return AnalysisResponse.model_validate(asdict(result))


@router.post("/api/analyze", response_model=AnalysisResponse)
async def analyze(request: AnalyzeRequest) -> AnalysisResponse:
    """Analyze transcript rows posted as JSON."""
    rows = [
        TranscriptRow(timestamp=r.timestamp, speaker=r.speaker, text=r.text)
        for r in request.rows
    ]
    result = analyze_transcript(rows, AnalysisConfig.from_settings(settings))
    return _to_response(result)


@router.post("/api/analyze/upload", response_model=AnalysisResponse)
async def analyze_upload(
    file: Annotated[UploadFile, File(...)],
) -> AnalysisResponse:
    """Upload a CSV transcript (``timestamp,speaker,text``) and analyze it."""
    filename = file.filename or ""
    if not filename.lower().endswith(".csv"):
        raise HTTPException(status_code=400, detail="Please upload a CSV file")

    # Enforce file size limit
    raw = await file.read()
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {settings.max_upload_bytes // 1024} KB.",
        )

    try:
        rows = parse_csv(raw.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise HTTPException(status_code=400, detail="Error reading the file") from exc
    except (TranscriptFormatError, InvalidRowError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    result = analyze_transcript(rows, AnalysisConfig.from_settings(settings))
    return _to_response(result)
