"""
Weighted-interest scoring between students and events.

Each profile is a sparse vector keyed by topic name; similarity is the cosine
over the union of topics (a missing topic counts as weight 0).
"""

import math
from typing import List, Optional

from ...models.interest import InterestProfile, TopicWeight
from ...models.scoring import MatchScore


def weighted_topic_similarity(v1: List[TopicWeight], v2: List[TopicWeight]) -> float:
    """Cosine similarity of two weighted topic lists; 0.0 if either has zero magnitude."""
    w1 = {t.topic: t.weight for t in v1}
    w2 = {t.topic: t.weight for t in v2}
    dot = sum(w * w2[topic] for topic, w in w1.items() if topic in w2)
    mag1 = math.sqrt(sum(w * w for w in w1.values()))
    mag2 = math.sqrt(sum(w * w for w in w2.values()))
    if mag1 == 0 or mag2 == 0:
        return 0.0
    return dot / (mag1 * mag2)


def calculate_match_score(student: InterestProfile, event: InterestProfile) -> MatchScore:
    """Score one student against one event and list the topics both carry."""
    event_topics = set(event.topic_names())
    matched = [t for t in dict.fromkeys(student.topic_names()) if t in event_topics]
    return MatchScore(
        student_id=student.id,
        event_id=event.id,
        score=weighted_topic_similarity(student.topics, event.topics),
        matched_topics=matched,
    )


def filter_by_threshold(scores: List[MatchScore], threshold: float) -> List[MatchScore]:
    """Keep scores >= threshold, highest first."""
    kept = [s for s in scores if s.score >= threshold]
    return sorted(kept, key=lambda s: s.score, reverse=True)


def score_students_for_event(
    students: List[InterestProfile],
    event: InterestProfile,
    threshold: Optional[float] = None,
) -> List[MatchScore]:
    """Audience for an event: every student scored, optionally floored at threshold."""
    scores = [calculate_match_score(s, event) for s in students]
    if threshold is not None:
        return filter_by_threshold(scores, threshold)
    return sorted(scores, key=lambda s: s.score, reverse=True)


def score_events_for_student(
    student: InterestProfile,
    events: List[InterestProfile],
    threshold: Optional[float] = None,
) -> List[MatchScore]:
    """Every event scored for one student, optionally floored at threshold."""
    scores = [calculate_match_score(student, e) for e in events]
    if threshold is not None:
        return filter_by_threshold(scores, threshold)
    return sorted(scores, key=lambda s: s.score, reverse=True)
