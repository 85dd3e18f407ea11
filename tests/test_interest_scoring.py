"""
Weighted Interest Scoring Tests

Tests topic-weight cosine, matched topics, threshold filtering, and
audience / per-student scoring.

Run:
----
    pytest tests/test_interest_scoring.py -v
"""

import pytest

from matching.models import MatchScore, TopicWeight
from matching.stages.ranking import (
    calculate_match_score,
    filter_by_threshold,
    score_events_for_student,
    score_students_for_event,
    weighted_topic_similarity,
)

from conftest import make_profile


class TestWeightedTopicSimilarity:

    def test_identical_profiles_score_one(self):
        topics = [TopicWeight(topic="AI", weight=0.8), TopicWeight(topic="Climate", weight=0.3)]
        assert weighted_topic_similarity(topics, topics) == pytest.approx(1.0)

    def test_disjoint_profiles_score_zero(self):
        a = [TopicWeight(topic="AI", weight=1.0)]
        b = [TopicWeight(topic="Finance", weight=1.0)]
        assert weighted_topic_similarity(a, b) == 0.0

    def test_empty_profile_scores_zero(self):
        assert weighted_topic_similarity([], [TopicWeight(topic="AI", weight=1.0)]) == 0.0

    def test_partial_overlap(self):
        a = [TopicWeight(topic="AI", weight=1.0), TopicWeight(topic="Climate", weight=1.0)]
        b = [TopicWeight(topic="AI", weight=1.0)]
        assert weighted_topic_similarity(a, b) == pytest.approx(2 ** -0.5)


class TestMatchScore:

    def test_matched_topics_in_student_order(self):
        student = make_profile("s", {"Climate": 0.5, "AI": 0.9, "Finance": 0.2})
        event = make_profile("e", {"AI": 1.0, "Climate": 1.0})
        score = calculate_match_score(student, event)
        assert score.student_id == "s"
        assert score.event_id == "e"
        assert score.matched_topics == ["Climate", "AI"]
        assert 0.0 < score.score <= 1.0


class TestThreshold:

    def test_keeps_scores_at_threshold_sorted(self):
        scores = [
            MatchScore(student_id="a", event_id="e", score=0.4),
            MatchScore(student_id="b", event_id="e", score=0.5),
            MatchScore(student_id="c", event_id="e", score=0.9),
        ]
        kept = filter_by_threshold(scores, 0.5)
        assert [s.student_id for s in kept] == ["c", "b"]


class TestAudienceAndDigestScoring:

    def test_students_for_event(self):
        event = make_profile("e", {"AI": 1.0})
        students = [
            make_profile("other", {"Finance": 1.0}),
            make_profile("fan", {"AI": 1.0}),
            make_profile("mixed", {"AI": 1.0, "Finance": 1.0}),
        ]
        ranked = score_students_for_event(students, event)
        assert [s.student_id for s in ranked] == ["fan", "mixed", "other"]

        audience = score_students_for_event(students, event, threshold=0.5)
        assert [s.student_id for s in audience] == ["fan", "mixed"]

    def test_events_for_student(self):
        student = make_profile("s", {"Healthcare": 1.0})
        events = [make_profile("ai", {"AI": 1.0}), make_profile("health", {"Healthcare": 0.7})]
        ranked = score_events_for_student(student, events)
        assert [s.event_id for s in ranked] == ["health", "ai"]
        assert ranked[0].score == pytest.approx(1.0)
