"""
Match orchestrator: picks the scoring mode for a posting and ranks candidates.

Embedding similarity is used when the posting has a vector; topic overlap is
the fallback; a posting with neither yields no matches.
The main entry points are match_posting (candidates passed in) and
match_posting_by_id (candidates fetched from an injected provider).
event_audience ranks students for an event by weighted interests.
"""

import logging
from typing import List, Optional, Tuple

from ..models.candidate import Candidate, Posting
from ..models.config import MatchingConfig, resolve_config
from ..models.scoring import MatchScore, ScoredCandidate
from ..services.candidate_provider import CandidateProvider
from ..utils.topics import normalize_query_topics
from .ranking import rank_by_similarity, rank_by_topic_overlap, score_students_for_event

logger = logging.getLogger(__name__)

MODE_EMBEDDING = "embedding"
MODE_TOPICS = "topics"
MODE_NONE = "none"


def _select_mode(posting: Posting) -> str:
    """Scoring mode for a posting: embedding when present, else topics, else none."""
    if posting.embedding:
        return MODE_EMBEDDING
    if normalize_query_topics(posting.topics):
        return MODE_TOPICS
    return MODE_NONE


def _apply_floor_and_limit(
    matches: List[ScoredCandidate],
    min_score: Optional[float],
    limit: Optional[int],
) -> List[ScoredCandidate]:
    """Drop matches below min_score, then cap at limit. Input is already sorted."""
    if min_score is not None:
        matches = [m for m in matches if m.score >= min_score]
    if limit is not None:
        matches = matches[:limit]
    return matches


def match_posting(
    posting: Posting,
    candidates: List[Candidate],
    min_score: Optional[float] = None,
    limit: Optional[int] = None,
) -> Tuple[List[ScoredCandidate], str]:
    """
    Rank candidates for a posting.

    Returns:
        matches: ScoredCandidate list sorted by score (descending)
        mode: "embedding", "topics", or "none"
    """
    mode = _select_mode(posting)
    if mode == MODE_EMBEDDING:
        with_embedding = [c for c in candidates if c.has_embedding]
        matches = rank_by_similarity(posting.embedding, with_embedding)
    elif mode == MODE_TOPICS:
        matches = rank_by_topic_overlap(posting.topics, candidates)
    else:
        logger.info("[match] POSTING_NO_QUERY posting_id=%s no embedding, no topics", posting.id)
        matches = []

    matches = _apply_floor_and_limit(matches, min_score, limit)
    logger.debug(
        "[match] RANKED posting_id=%s mode=%s candidates=%s matches=%s",
        posting.id, mode, len(candidates), len(matches),
    )
    return matches, mode


def match_posting_by_id(
    posting_id: str,
    provider: CandidateProvider,
    config: Optional[MatchingConfig] = None,
) -> Tuple[List[ScoredCandidate], str]:
    """
    Fetch a posting and the candidate population from provider, then rank.

    Floor and limit come from config (match_min_score, match_limit).
    Raises LookupError if the posting does not exist.
    """
    config = resolve_config(config)
    posting = provider.get_posting(posting_id)
    if posting is None:
        raise LookupError(f"Posting not found: {posting_id}")
    return match_posting(
        posting,
        provider.get_candidates(),
        min_score=config.match_min_score,
        limit=config.match_limit,
    )


def event_audience(
    event_id: str,
    provider: CandidateProvider,
    config: Optional[MatchingConfig] = None,
) -> List[MatchScore]:
    """
    Students whose weighted interests match an event, best first.

    Scores every student profile from provider against the event and keeps
    those at or above config.audience_threshold.
    Raises LookupError if the event does not exist.
    """
    config = resolve_config(config)
    event = next((e for e in provider.get_event_profiles() if e.id == event_id), None)
    if event is None:
        raise LookupError(f"Event not found: {event_id}")
    audience = score_students_for_event(
        provider.get_student_profiles(), event, config.audience_threshold
    )
    logger.debug(
        "[audience] SCORED event_id=%s threshold=%s audience=%s",
        event_id, config.audience_threshold, len(audience),
    )
    return audience
