"""Pipeline stages: ranking, match orchestration, weekly digests."""

from .digest import WeeklyDigest, build_student_digest, build_weekly_digests
from .orchestrator import event_audience, match_posting, match_posting_by_id
from .ranking import rank_by_similarity, rank_by_topic_overlap

__all__ = [
    "rank_by_similarity",
    "rank_by_topic_overlap",
    "match_posting",
    "match_posting_by_id",
    "event_audience",
    "WeeklyDigest",
    "build_student_digest",
    "build_weekly_digests",
]
