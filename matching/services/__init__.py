"""Data-access services: record parsing and candidate providers."""

from .candidate_provider import (
    CandidateProvider,
    InMemoryCandidateProvider,
    JsonCandidateProvider,
    parse_candidate,
    parse_candidates,
    parse_interest_profile,
    parse_posting,
)

__all__ = [
    "CandidateProvider",
    "InMemoryCandidateProvider",
    "JsonCandidateProvider",
    "parse_candidate",
    "parse_candidates",
    "parse_interest_profile",
    "parse_posting",
]
