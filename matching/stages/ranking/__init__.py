"""
Ranking: score candidates against a posting, or students against events.

Public API: rank_by_similarity, rank_by_topic_overlap, and the weighted-interest helpers.
- similarity: cosine similarity over embeddings.
- topic_overlap: fuzzy topic matching when embeddings are unavailable.
- interest_scoring: weighted topic cosine for event audiences and digests.
"""

from .interest_scoring import (
    calculate_match_score,
    filter_by_threshold,
    score_events_for_student,
    score_students_for_event,
    weighted_topic_similarity,
)
from .similarity import rank_by_similarity
from .topic_overlap import rank_by_topic_overlap

__all__ = [
    "rank_by_similarity",
    "rank_by_topic_overlap",
    "calculate_match_score",
    "filter_by_threshold",
    "score_events_for_student",
    "score_students_for_event",
    "weighted_topic_similarity",
]
