"""
Topic-overlap ranking for when embeddings are unavailable.

Score = fraction of distinct query topics matched by at least one candidate
topic, where a match is equality or substring containment in either direction.
"""

from typing import Iterable, List, Set

from ...models.candidate import Candidate
from ...models.scoring import ScoredCandidate
from ...utils.topics import normalize_query_topics, topic_matches


def _matched_query_topics(candidate_topics: List[str], query_topics: List[str]) -> Set[str]:
    """Query topics satisfied by at least one candidate topic."""
    return {
        q
        for q in query_topics
        if any(topic_matches(c, q) for c in candidate_topics)
    }


def rank_by_topic_overlap(
    query_topics: Iterable[str],
    candidates: Iterable[Candidate],
) -> List[ScoredCandidate]:
    """
    Rank all candidates by topic overlap with query_topics (0-1).

    Returns [] when no usable query topic remains after trimming.
    Candidates without topics score 0.0 and are kept. Ties keep input order.
    """
    query = normalize_query_topics(query_topics)
    if not query:
        return []

    scored = [
        ScoredCandidate(
            candidate=c,
            score=len(_matched_query_topics(c.topics, query)) / len(query),
        )
        for c in candidates
    ]
    return sorted(scored, key=lambda s: s.score, reverse=True)
