"""
Weekly digest: top upcoming events per student by weighted interests.

Filters events to those starting at or after now, scores them per student,
keeps those at or above digest_min_score, and caps at digest_top_n.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel

from ..models.config import MatchingConfig, resolve_config
from ..models.interest import InterestProfile
from ..models.scoring import MatchScore
from .ranking import score_events_for_student


class WeeklyDigest(BaseModel):
    """Digest items for every student for one week."""

    week_of: datetime
    items: Dict[str, List[MatchScore]]

    @property
    def total_items(self) -> int:
        return sum(len(v) for v in self.items.values())


def week_start(now: Optional[datetime] = None) -> datetime:
    """Monday 00:00 of the week containing now (UTC when now is None)."""
    now = now or datetime.now(timezone.utc)
    monday = now - timedelta(days=now.weekday())
    return monday.replace(hour=0, minute=0, second=0, microsecond=0)


def upcoming_events(
    events: List[InterestProfile],
    now: Optional[datetime] = None,
) -> List[InterestProfile]:
    """Events starting at or after now; events without a valid start date are dropped."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    result = []
    for event in events:
        starts = event.start_datetime()
        if starts is not None and starts >= now:
            result.append(event)
    return result


def build_student_digest(
    student: InterestProfile,
    events: List[InterestProfile],
    config: Optional[MatchingConfig] = None,
) -> List[MatchScore]:
    """Top digest_top_n events for one student scoring at least digest_min_score."""
    config = resolve_config(config)
    scores = score_events_for_student(student, events, config.digest_min_score)
    return scores[: config.digest_top_n]


def build_weekly_digests(
    students: List[InterestProfile],
    events: List[InterestProfile],
    now: Optional[datetime] = None,
    config: Optional[MatchingConfig] = None,
) -> WeeklyDigest:
    """Build digests for all students over the upcoming events."""
    config = resolve_config(config)
    now = now or datetime.now(timezone.utc)
    upcoming = upcoming_events(events, now)
    items = {s.id: build_student_digest(s, upcoming, config) for s in students}
    return WeeklyDigest(week_of=week_start(now), items=items)
