"""Tests for API endpoints."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from meeting_memory.api.main import app

client = TestClient(app)

SPRINT_CSV = b"""timestamp,speaker,text
00:00,PM,Let's decide the sprint plan
00:05,Eng1,"I need to fix the login bug, it's critical"
00:10,QA,Is this tested? issue with timeouts
"""

SPRINT_ROWS = [
    {"timestamp": "00:00", "speaker": "PM", "text": "Let's decide the sprint plan"},
    {"timestamp": "00:05", "speaker": "Eng1", "text": "I need to fix the login bug, it's critical"},
    {"timestamp": "00:10", "speaker": "QA", "text": "Is this tested? issue with timeouts"},
]


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


# --- JSON rows ---


def test_analyze_rows():
    response = client.post("/api/analyze", json={"rows": SPRINT_ROWS})
    assert response.status_code == 200

    body = response.json()
    assert [a["row_index"] for a in body["action_items"]] == [0, 1]
    assert body["action_items"][1]["priority"] == "high"
    assert body["decisions"][0]["impact_level"] == "normal"
    assert body["questions"][0]["category"] == "bug"
    assert body["questions"][0]["addressed"] is False
    assert body["meeting_stats"]["duration"] == 10
    assert body["meeting_stats"]["action_item_ratio"] == pytest.approx(2 / 3)
    assert body["participation_metrics"]["decisions_by_user"] == {"PM": 1}
    assert len(body["ai_suggestions"]) == 3
    assert len(body["follow_up_reminders"]) == 3


def test_analyze_empty_rows():
    response = client.post("/api/analyze", json={"rows": []})
    assert response.status_code == 200

    stats = response.json()["meeting_stats"]
    assert stats["speaker_count"] == 0
    assert stats["action_item_ratio"] == 0.0
    assert stats["questions_addressed_ratio"] == 0.0


def test_analyze_requires_text():
    response = client.post("/api/analyze", json={"rows": [{"timestamp": "0", "speaker": "PM"}]})
    assert response.status_code == 422


def test_analyze_requires_rows():
    response = client.post("/api/analyze", json={})
    assert response.status_code == 422


# --- CSV upload ---


def test_upload_csv():
    response = client.post(
        "/api/analyze/upload",
        files={"file": ("meeting.csv", SPRINT_CSV, "text/csv")},
    )
    assert response.status_code == 200
    assert len(response.json()["action_items"]) == 2


def test_upload_requires_file():
    response = client.post("/api/analyze/upload")
    assert response.status_code == 422


def test_upload_rejects_non_csv():
    response = client.post(
        "/api/analyze/upload",
        files={"file": ("notes.txt", b"hello", "text/plain")},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Please upload a CSV file"


def test_upload_missing_columns():
    response = client.post(
        "/api/analyze/upload",
        files={"file": ("meeting.csv", b"timestamp,speaker\n00:00,PM\n", "text/csv")},
    )
    assert response.status_code == 400
    assert "missing required columns: text" in response.json()["detail"]


def test_upload_empty_csv():
    response = client.post(
        "/api/analyze/upload",
        files={"file": ("meeting.csv", b"timestamp,speaker,text\n", "text/csv")},
    )
    assert response.status_code == 400
    assert "empty" in response.json()["detail"]


def test_upload_binary_rejected():
    response = client.post(
        "/api/analyze/upload",
        files={"file": ("meeting.csv", b"\xff\xfe\x00\x81", "text/csv")},
    )
    assert response.status_code == 400


def test_upload_too_large():
    with patch("meeting_memory.api.routes.analysis.settings") as mock_settings:
        mock_settings.max_upload_bytes = 10
        response = client.post(
            "/api/analyze/upload",
            files={"file": ("meeting.csv", SPRINT_CSV, "text/csv")},
        )
    assert response.status_code == 413
