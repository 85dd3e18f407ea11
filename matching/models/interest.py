"""
Interest models: weighted topics for students and events.

Used by interest scoring (audience / digest) and interest-weight maintenance.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TopicWeight(BaseModel):
    """A topic name with its weight (0-1 after normalization)."""

    topic: str
    weight: float


class InterestProfile(BaseModel):
    """
    Weighted topics for a student or an event.

    starts_at: ISO date string; only meaningful for events (digest filters on it).
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    topics: List[TopicWeight] = Field(default_factory=list)
    starts_at: Optional[str] = None

    def topic_names(self) -> List[str]:
        return [t.topic for t in self.topics]

    def start_datetime(self) -> Optional[datetime]:
        """Parsed starts_at (UTC when no offset is given), or None if missing or invalid."""
        if not self.starts_at:
            return None
        try:
            dt = datetime.fromisoformat(self.starts_at.replace("Z", "+00:00"))
        except ValueError:
            return None
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt
