"""
Scoring models: ranking output.

Contains:
- ScoredCandidate: a candidate with its similarity or topic-overlap score
- MatchScore: a student/event pair scored on weighted interests
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .candidate import Candidate


class ScoredCandidate(BaseModel):
    """A candidate with the score it received for one query."""

    candidate: Candidate
    score: float

    @property
    def id(self) -> str:
        return self.candidate.id

    @property
    def name(self) -> Optional[str]:
        return self.candidate.name

    @property
    def email(self) -> Optional[str]:
        return self.candidate.email

    @property
    def topics(self) -> List[str]:
        return self.candidate.topics

    def to_match_dict(self) -> Dict[str, Any]:
        """Flat output shape: id, name, email, topics, score."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "topics": list(self.topics),
            "score": self.score,
        }


class MatchScore(BaseModel):
    """Weighted-interest match between one student and one event."""

    student_id: str
    event_id: str
    score: float
    matched_topics: List[str] = Field(default_factory=list)
