"""Shared utilities for similarity and topic matching."""

from .similarity import cosine_similarity
from .topics import normalize_query_topics, normalize_topic, topic_matches

__all__ = [
    "cosine_similarity",
    "normalize_query_topics",
    "normalize_topic",
    "topic_matches",
]
