"""Data models for matching students to postings and events."""

from .candidate import Candidate, Posting
from .config import DEFAULT_CONFIG, MatchingConfig, resolve_config
from .interest import InterestProfile, TopicWeight
from .scoring import MatchScore, ScoredCandidate

__all__ = [
    "DEFAULT_CONFIG",
    "Candidate",
    "InterestProfile",
    "MatchScore",
    "MatchingConfig",
    "Posting",
    "ScoredCandidate",
    "TopicWeight",
    "resolve_config",
]
