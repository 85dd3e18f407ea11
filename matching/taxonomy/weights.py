"""
Interest weight maintenance: normalization, multi-source merge, and feedback.

Weights live in [0, 1]. Every function returns a new list, highest weight first;
inputs are never modified.
"""

from typing import Dict, List, Optional, Tuple

from ..models.config import MatchingConfig, resolve_config
from ..models.interest import TopicWeight

# Student interaction -> feedback type
INTERACTION_FEEDBACK = {
    "strong_interest": "strong_positive",
    "interested": "positive",
    "not_relevant": "negative",
}


def normalize_weights(topics: List[TopicWeight]) -> List[TopicWeight]:
    """Clamp weights to [0, 1], drop zero weights, sort by weight (descending)."""
    clamped = [
        TopicWeight(topic=t.topic, weight=min(1.0, max(0.0, t.weight)))
        for t in topics
    ]
    kept = [t for t in clamped if t.weight > 0]
    return sorted(kept, key=lambda t: t.weight, reverse=True)


def merge_topic_weights(sources: List[Tuple[List[TopicWeight], int]]) -> List[TopicWeight]:
    """
    Merge weights from several (weights, priority) sources.

    A source with higher priority overrides an existing topic weight; equal
    priority averages the two. Lower priority never overrides.
    """
    merged: Dict[str, Tuple[float, int]] = {}
    for weights, priority in sources:
        for t in weights:
            existing = merged.get(t.topic)
            if existing is None or priority > existing[1]:
                merged[t.topic] = (t.weight, priority)
            elif priority == existing[1]:
                merged[t.topic] = ((existing[0] + t.weight) / 2, priority)
    return normalize_weights(
        [TopicWeight(topic=topic, weight=w) for topic, (w, _) in merged.items()]
    )


def apply_feedback(
    current: List[TopicWeight],
    feedback_topics: List[str],
    feedback_type: str,
    config: Optional[MatchingConfig] = None,
) -> List[TopicWeight]:
    """
    Adjust weights of feedback_topics by the configured amount for feedback_type.

    feedback_type: "strong_positive", "positive", or "negative".
    Topics without a weight start at config.feedback_default_weight.
    """
    config = resolve_config(config)
    adjustments = config.feedback_adjustments
    if feedback_type not in adjustments:
        raise ValueError(f"Unknown feedback type: {feedback_type!r}")
    adjustment = adjustments[feedback_type]

    weights = {t.topic: t.weight for t in current}
    for topic in feedback_topics:
        base = weights.get(topic) or config.feedback_default_weight
        weights[topic] = min(1.0, max(0.0, base + adjustment))

    return normalize_weights(
        [TopicWeight(topic=topic, weight=w) for topic, w in weights.items()]
    )


def update_student_interests(
    current: List[TopicWeight],
    event_topics: List[str],
    interaction_type: str,
    config: Optional[MatchingConfig] = None,
) -> List[TopicWeight]:
    """Apply feedback from a student interaction ("strong_interest", "interested", "not_relevant")."""
    if interaction_type not in INTERACTION_FEEDBACK:
        raise ValueError(f"Unknown interaction type: {interaction_type!r}")
    return apply_feedback(current, event_topics, INTERACTION_FEEDBACK[interaction_type], config)
