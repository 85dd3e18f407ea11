"""
Embedding-similarity ranking.

Scores each candidate that carries an embedding by cosine similarity to the
query vector and returns them sorted by descending score.
"""

import logging
from typing import Iterable, List, Sequence

from ...models.candidate import Candidate
from ...models.scoring import ScoredCandidate
from ...utils.similarity import cosine_similarity

logger = logging.getLogger(__name__)


def rank_by_similarity(
    query_vector: Sequence[float],
    candidates: Iterable[Candidate],
) -> List[ScoredCandidate]:
    """
    Rank candidates by cosine similarity to query_vector.

    Candidates without an embedding are skipped. Mismatched or zero vectors
    score 0.0. Ties keep input order.
    """
    scored: List[ScoredCandidate] = []
    skipped = 0
    for candidate in candidates:
        if not candidate.embedding:
            skipped += 1
            continue
        score = cosine_similarity(query_vector, candidate.embedding)
        scored.append(ScoredCandidate(candidate=candidate, score=score))

    if skipped:
        logger.debug(
            "[match] CANDIDATE_EMBEDDING_MISSING skipped=%s scored=%s",
            skipped, len(scored),
        )

    # sorted() is stable with reverse=True
    return sorted(scored, key=lambda s: s.score, reverse=True)
