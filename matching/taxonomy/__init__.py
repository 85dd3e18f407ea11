"""Topic taxonomy and interest weight maintenance."""

from .topic_map import (
    CANONICAL_TOPICS,
    TOPIC_SYNONYMS,
    extract_canonical_topics,
    normalize_topic_name,
)
from .weights import (
    apply_feedback,
    merge_topic_weights,
    normalize_weights,
    update_student_interests,
)

__all__ = [
    "CANONICAL_TOPICS",
    "TOPIC_SYNONYMS",
    "extract_canonical_topics",
    "normalize_topic_name",
    "apply_feedback",
    "merge_topic_weights",
    "normalize_weights",
    "update_student_interests",
]
