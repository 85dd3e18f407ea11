"""
Opportunity Match: student/opportunity ranking

Single entry point for the matching package:
- models/: Candidate, Posting, ScoredCandidate, InterestProfile, MatchingConfig
- stages/: ranking (embedding similarity, topic overlap, weighted interests), orchestrator, digest
- taxonomy/: canonical topics and interest weight maintenance
- services/: record parsing and candidate providers
"""

from .models import (
    DEFAULT_CONFIG,
    Candidate,
    InterestProfile,
    MatchingConfig,
    MatchScore,
    Posting,
    ScoredCandidate,
    TopicWeight,
)
from .services import CandidateProvider, InMemoryCandidateProvider, JsonCandidateProvider
from .stages import (
    build_weekly_digests,
    event_audience,
    match_posting,
    match_posting_by_id,
    rank_by_similarity,
    rank_by_topic_overlap,
)
from .utils import cosine_similarity

__all__ = [
    "DEFAULT_CONFIG",
    "Candidate",
    "CandidateProvider",
    "InMemoryCandidateProvider",
    "InterestProfile",
    "JsonCandidateProvider",
    "MatchScore",
    "MatchingConfig",
    "Posting",
    "ScoredCandidate",
    "TopicWeight",
    "build_weekly_digests",
    "cosine_similarity",
    "event_audience",
    "match_posting",
    "match_posting_by_id",
    "rank_by_similarity",
    "rank_by_topic_overlap",
]
