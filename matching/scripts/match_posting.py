#!/usr/bin/env python3
"""
Rank students for one posting and print the matches as JSON.

Uses embedding similarity when the posting has an embedding, topic overlap
otherwise. Students and postings are read from JSON files (lists of records).

Usage:
  From repo root:
    python -m matching.scripts.match_posting --posting-id p-123

  Optional:
    --students data/students.json
    --postings data/postings.json
    --min-score 0.3
    --limit 25
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from matching.config import get_settings
from matching.logger import setup_logging
from matching.models.config import MatchingConfig
from matching.services.candidate_provider import JsonCandidateProvider
from matching.stages.orchestrator import match_posting_by_id

logger = logging.getLogger("matching.scripts.match_posting")


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Rank students for a posting")
    parser.add_argument("--posting-id", required=True, help="Posting id to match")
    parser.add_argument(
        "--students",
        type=Path,
        default=settings.students_json_path,
        help="Students JSON (default: STUDENTS_JSON_PATH or data/students.json)",
    )
    parser.add_argument(
        "--postings",
        type=Path,
        default=settings.postings_json_path,
        help="Postings JSON (default: POSTINGS_JSON_PATH or data/postings.json)",
    )
    parser.add_argument("--min-score", type=float, default=None, help="Drop matches below this score")
    parser.add_argument("--limit", type=int, default=None, help="Max matches to print")
    args = parser.parse_args(argv)

    setup_logging(settings.log_level)

    try:
        config = settings.load_matching_config()
        overrides = {}
        if args.min_score is not None:
            overrides["match_min_score"] = args.min_score
        if args.limit is not None:
            overrides["match_limit"] = args.limit
        if overrides:
            config = MatchingConfig(**(config.model_dump() | overrides))
        provider = JsonCandidateProvider(args.students, args.postings)
        matches, mode = match_posting_by_id(args.posting_id, provider, config)
    except (FileNotFoundError, LookupError, ValueError) as e:
        logger.error("match failed: %s", e)
        return 1

    print(json.dumps(
        {
            "posting_id": args.posting_id,
            "mode": mode,
            "matches": [m.to_match_dict() for m in matches],
        },
        indent=2,
    ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
