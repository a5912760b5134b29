"""Analyze a transcript file from the command line and print the result as JSON."""

import argparse
import json
import logging
import sys
from dataclasses import asdict, replace
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from meeting_memory.analysis.engine import analyze_transcript
from meeting_memory.analysis_config import AnalysisConfig, AssigneeMatching
from meeting_memory.config import settings
from meeting_memory.ingestion.parsers import parse_transcript


def main() -> int:
    parser = argparse.ArgumentParser(description="Analyze a meeting transcript")
    parser.add_argument("path", type=Path, help="Transcript file (.csv or .json)")
    parser.add_argument(
        "--format",
        choices=["csv", "json"],
        default=None,
        help="Transcript format (default: inferred from the file extension)",
    )
    parser.add_argument(
        "--word-boundary",
        action="store_true",
        help="Match speaker names on word boundaries when inferring assignees",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    transcript_format = args.format or args.path.suffix.lstrip(".").lower()
    try:
        rows = parse_transcript(args.path.read_text(encoding="utf-8"), transcript_format)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    config = AnalysisConfig.from_settings(settings)
    if args.word_boundary:
        config = replace(config, assignee_matching=AssigneeMatching.WORD_BOUNDARY)

    result = analyze_transcript(rows, config)
    print(json.dumps(asdict(result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
