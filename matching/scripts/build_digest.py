#!/usr/bin/env python3
"""
Build weekly event digests from weighted student interests and print them as JSON.

Only events starting at or after --now are considered; each student gets the
top digest_top_n events scoring at least digest_min_score.

Usage:
  From repo root:
    python -m matching.scripts.build_digest

  Optional:
    --students data/students.json
    --events data/events.json
    --student-id s-1            (one student only)
    --now 2026-03-02T09:00:00Z  (default: current time)
"""

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from matching.config import get_settings
from matching.logger import setup_logging
from matching.services.candidate_provider import JsonCandidateProvider
from matching.stages.digest import build_weekly_digests

logger = logging.getLogger("matching.scripts.build_digest")


def _parse_now(value: Optional[str]) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Build weekly event digests")
    parser.add_argument("--students", type=Path, default=settings.students_json_path)
    parser.add_argument("--events", type=Path, default=settings.events_json_path)
    parser.add_argument("--student-id", default=None, help="Only build the digest for this student")
    parser.add_argument("--now", default=None, help="ISO timestamp used as the current time")
    args = parser.parse_args(argv)

    setup_logging(settings.log_level)

    try:
        config = settings.load_matching_config()
        now = _parse_now(args.now)
        provider = JsonCandidateProvider(args.students, events_path=args.events)
        students = provider.get_student_profiles()
        if args.student_id is not None:
            students = [s for s in students if s.id == args.student_id]
            if not students:
                raise LookupError(f"Student not found: {args.student_id}")
        digest = build_weekly_digests(students, provider.get_event_profiles(), now, config)
    except (FileNotFoundError, LookupError, ValueError) as e:
        logger.error("digest failed: %s", e)
        return 1

    logger.info("[digest] BUILT students=%s items=%s", len(digest.items), digest.total_items)
    print(json.dumps(
        {
            "week_of": digest.week_of.isoformat(),
            "digests": {
                student_id: [
                    {"event_id": s.event_id, "score": s.score, "matched_topics": s.matched_topics}
                    for s in scores
                ]
                for student_id, scores in digest.items.items()
            },
        },
        indent=2,
    ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
