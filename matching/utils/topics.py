"""
Topic helpers: normalization and fuzzy matching of free-text topics.
"""

from typing import Iterable, List


def normalize_topic(topic: str) -> str:
    """Trimmed, lower-cased form used for comparison."""
    return topic.strip().lower()


def normalize_query_topics(topics: Iterable[str]) -> List[str]:
    """Distinct non-empty normalized topics, in first-seen order."""
    normalized = (normalize_topic(t) for t in topics)
    return list(dict.fromkeys(t for t in normalized if t))


def topic_matches(candidate_topic: str, query_topic: str) -> bool:
    """
    True if the topics are equal or one contains the other (case-insensitive).

    "mechanical" matches "mechanical engineering" in either direction.
    Short topics match broadly; blank topics match nothing.
    """
    c = normalize_topic(candidate_topic)
    q = normalize_topic(query_topic)
    if not c or not q:
        return False
    return c == q or c in q or q in c
