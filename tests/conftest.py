"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from matching.config import reload_settings
from matching.models import Candidate, InterestProfile, TopicWeight


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Point settings at an empty temp data dir so a local .env never leaks in."""
    for key in (
        "STUDENTS_JSON_PATH",
        "POSTINGS_JSON_PATH",
        "EVENTS_JSON_PATH",
        "MATCHING_CONFIG_PATH",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    reload_settings()
    yield
    reload_settings()


@pytest.fixture
def student_records() -> List[Dict[str, Any]]:
    """Raw student records as stored (one with a malformed embedding, one without id)."""
    return [
        {
            "id": "s-1",
            "name": "Ada",
            "email": "ada@example.edu",
            "topics": ["Machine Learning", "Robotics"],
            "embedding": [1.0, 0.0, 0.0],
            "interests": [{"topic": "AI", "weight": 0.9}, {"topic": "Climate", "weight": 0.4}],
        },
        {
            "id": "s-2",
            "name": "Grace",
            "email": None,
            "topics": ["Mechanical Engineering", 42],
            "embedding": [0.0, 1.0, 0.0],
            "interests": [{"topic": "Healthcare", "weight": 1.0}],
        },
        {
            "id": "s-3",
            "name": "Linus",
            "topics": ["AI", "Chemistry"],
            "embedding": "not-a-vector",
            "interests": [{"topic": "AI", "weight": 0.5}, {"topic": "Finance", "weight": 0.5}],
        },
        {"name": "No Id", "topics": ["AI"]},
    ]


@pytest.fixture
def posting_records() -> List[Dict[str, Any]]:
    return [
        {"id": "p-emb", "title": "ML Intern", "topics": ["ai"], "embedding": [1.0, 0.1, 0.0]},
        {"id": "p-top", "title": "Shop Assistant", "topics": ["mechanical", "ai"], "embedding": None},
        {"id": "p-none", "title": "Mystery", "topics": ["  ", ""]},
    ]


@pytest.fixture
def event_records() -> List[Dict[str, Any]]:
    return [
        {
            "id": "e-ai",
            "starts_at": "2026-03-05T18:00:00Z",
            "interests": [{"topic": "AI", "weight": 1.0}],
        },
        {
            "id": "e-health",
            "starts_at": "2026-03-06T18:00:00Z",
            "interests": [{"topic": "Healthcare", "weight": 1.0}],
        },
        {
            "id": "e-past",
            "starts_at": "2026-02-01T18:00:00Z",
            "interests": [{"topic": "AI", "weight": 1.0}],
        },
        {"id": "e-undated", "interests": [{"topic": "AI", "weight": 1.0}]},
    ]


@pytest.fixture
def data_files(tmp_path, student_records, posting_records, event_records) -> Dict[str, Path]:
    """Students, postings, and events written as JSON files."""
    paths = {}
    for name, records in (
        ("students", student_records),
        ("postings", posting_records),
        ("events", event_records),
    ):
        path = tmp_path / f"{name}.json"
        path.write_text(json.dumps(records))
        paths[name] = path
    return paths


def make_candidate(cid: str, topics=None, embedding=None) -> Candidate:
    return Candidate(id=cid, name=f"Student {cid}", topics=topics or [], embedding=embedding)


def make_profile(pid: str, weights: Dict[str, float], starts_at=None) -> InterestProfile:
    return InterestProfile(
        id=pid,
        topics=[TopicWeight(topic=t, weight=w) for t, w in weights.items()],
        starts_at=starts_at,
    )
