"""
Candidate Provider Tests

Tests tagged parsing of stored records and the in-memory / JSON providers.

Run:
----
    pytest tests/test_candidate_provider.py -v
"""

import json
import logging

import pytest

from matching.services import (
    InMemoryCandidateProvider,
    JsonCandidateProvider,
    parse_candidate,
    parse_candidates,
    parse_interest_profile,
    parse_posting,
)


class TestRecordParsing:

    def test_candidate_fields(self):
        c = parse_candidate({
            "id": 7,
            "name": "Ada",
            "email": "ada@example.edu",
            "topics": ["AI", None, 3, "Climate"],
            "embedding": [1, 2.5, 0],
        })
        assert c.id == "7"
        assert c.topics == ["AI", "Climate"]
        assert c.embedding == [1.0, 2.5, 0.0]

    @pytest.mark.parametrize(
        "embedding",
        [
            None, "1,2,3", {"v": [1]}, [1.0, "2"], [True, False], 5,
            [float("inf"), 1.0], [1.0, float("-inf")], [float("nan"), 0.0],
        ],
    )
    def test_malformed_embedding_becomes_none(self, embedding):
        c = parse_candidate({"id": "s", "embedding": embedding})
        assert c.embedding is None
        assert not c.has_embedding

    def test_non_list_topics_become_empty(self):
        assert parse_candidate({"id": "s", "topics": "AI, ML"}).topics == []

    def test_non_string_name_dropped(self):
        assert parse_candidate({"id": "s", "name": 12}).name is None

    @pytest.mark.parametrize("record", [{}, {"id": None}, {"id": ""}, {"id": True}, {"id": [1]}])
    def test_missing_id_raises(self, record):
        with pytest.raises(ValueError):
            parse_candidate(record)

    def test_parse_candidates_skips_malformed(self):
        parsed = parse_candidates([{"id": "a"}, {"name": "no id"}, "junk", {"id": "b"}])
        assert [c.id for c in parsed] == ["a", "b"]

    def test_posting(self):
        p = parse_posting({"id": "p", "title": "Intern", "topics": ["AI"], "embedding": None})
        assert p.title == "Intern"
        assert p.embedding is None

    def test_interest_profile(self):
        profile = parse_interest_profile({
            "id": "e",
            "event_date": "2026-03-05",
            "interests": [
                {"topic": "AI", "weight": 0.5},
                {"topic": "Climate"},
                {"topic": 1, "weight": 1.0},
                {"topic": "VC", "weight": "high"},
                "junk",
            ],
        })
        assert [(t.topic, t.weight) for t in profile.topics] == [("AI", 0.5), ("Climate", 1.0)]
        assert profile.starts_at == "2026-03-05"


class TestInMemoryProvider:

    def test_lookups(self, student_records, posting_records, event_records):
        provider = InMemoryCandidateProvider(student_records, posting_records, event_records)
        assert [c.id for c in provider.get_candidates()] == ["s-1", "s-2", "s-3"]
        assert [s.id for s in provider.get_student_profiles()] == ["s-1", "s-2", "s-3"]
        assert provider.get_posting("p-top").topics == ["mechanical", "ai"]
        assert provider.get_posting("nope") is None
        assert len(provider.get_postings()) == 3
        assert len(provider.get_event_profiles()) == 4

    def test_returns_copies(self, student_records):
        provider = InMemoryCandidateProvider(student_records)
        provider.get_candidates().clear()
        assert len(provider.get_candidates()) == 3


class TestJsonProvider:

    def test_loads_files(self, data_files):
        provider = JsonCandidateProvider(
            data_files["students"], data_files["postings"], data_files["events"]
        )
        assert len(provider.get_candidates()) == 3
        assert provider.get_posting("p-emb").embedding == [1.0, 0.1, 0.0]
        assert len(provider.get_event_profiles()) == 4

    def test_events_optional(self, data_files, tmp_path):
        provider = JsonCandidateProvider(
            data_files["students"], data_files["postings"], tmp_path / "missing.json"
        )
        assert provider.get_event_profiles() == []

    def test_missing_students_file(self, data_files, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonCandidateProvider(tmp_path / "missing.json", data_files["postings"])

    def test_non_list_json_rejected(self, data_files, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"students": []}))
        with pytest.raises(ValueError):
            JsonCandidateProvider(bad, data_files["postings"])

    def test_postings_optional(self, data_files):
        provider = JsonCandidateProvider(data_files["students"], events_path=data_files["events"])
        assert provider.get_postings() == []
        assert len(provider.get_student_profiles()) == 3

    def test_missing_postings_file_given(self, data_files, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonCandidateProvider(data_files["students"], tmp_path / "missing.json")

    def test_non_finite_embedding_from_file(self, tmp_path):
        students = tmp_path / "students.json"
        # json.dumps writes Infinity / NaN literals, which json.load accepts
        students.write_text(json.dumps([
            {"id": "inf", "embedding": [float("inf"), 1.0]},
            {"id": "ok", "embedding": [1.0, 0.0]},
        ]))
        provider = JsonCandidateProvider(students)
        embeddings = {c.id: c.embedding for c in provider.get_candidates()}
        assert embeddings == {"inf": None, "ok": [1.0, 0.0]}


class TestSkipLogging:

    def test_malformed_student_logged_once(self, student_records, caplog):
        with caplog.at_level(logging.WARNING, logger="matching.services.candidate_provider"):
            InMemoryCandidateProvider(student_records)
        skipped = [r for r in caplog.records if "RECORD_SKIPPED" in r.getMessage()]
        assert len(skipped) == 1
        summaries = [r for r in caplog.records if "RECORDS_SKIPPED" in r.getMessage()]
        assert len(summaries) == 1
