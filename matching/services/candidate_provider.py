"""
Candidate Provider abstraction.

Supplies students (candidates and interest profiles), postings, and events to
the matching stages. Raw stored records are parsed here, so the ranking code
only ever sees typed models.
Implementations: in-memory (tests, embedding callers) and JSON files.
"""

import json
import logging
import math
from numbers import Real
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Tuple, Union

from ..models.candidate import Candidate, Posting
from ..models.interest import InterestProfile, TopicWeight

logger = logging.getLogger(__name__)


# ============================================================
# RECORD PARSING
# ============================================================

def _record_id(record: Dict[str, Any]) -> str:
    rid = record.get("id")
    if isinstance(rid, bool) or not isinstance(rid, (str, int)) or rid == "":
        raise ValueError(f"Record has no usable id: {record.get('id')!r}")
    return str(rid)


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _parse_embedding(value: Any) -> Optional[List[float]]:
    """A list of finite real numbers, or None for anything else (missing, null, mixed types, NaN/Infinity)."""
    if not isinstance(value, list):
        return None
    if not all(isinstance(x, Real) and not isinstance(x, bool) and math.isfinite(x) for x in value):
        return None
    return [float(x) for x in value]


def _parse_topics(value: Any) -> List[str]:
    """String entries of a topic list; non-list values give []."""
    if not isinstance(value, list):
        return []
    return [t for t in value if isinstance(t, str)]


def _parse_interests(value: Any) -> List[TopicWeight]:
    """Entries with a string topic and a numeric weight."""
    if not isinstance(value, list):
        return []
    interests = []
    for item in value:
        if not isinstance(item, dict):
            continue
        topic = item.get("topic")
        weight = item.get("weight", 1.0)
        if isinstance(topic, str) and isinstance(weight, Real) and not isinstance(weight, bool):
            interests.append(TopicWeight(topic=topic, weight=float(weight)))
    return interests


def parse_candidate(record: Dict[str, Any]) -> Candidate:
    """Build a Candidate from a stored student record. Raises ValueError without an id."""
    return Candidate(
        id=_record_id(record),
        name=_optional_str(record.get("name")),
        email=_optional_str(record.get("email")),
        topics=_parse_topics(record.get("topics")),
        embedding=_parse_embedding(record.get("embedding")),
    )


def parse_posting(record: Dict[str, Any]) -> Posting:
    """Build a Posting from a stored record. Raises ValueError without an id."""
    return Posting(
        id=_record_id(record),
        title=_optional_str(record.get("title")),
        topics=_parse_topics(record.get("topics")),
        embedding=_parse_embedding(record.get("embedding")),
    )


def parse_interest_profile(record: Dict[str, Any]) -> InterestProfile:
    """
    Build an InterestProfile from a student or event record.

    Weighted topics come from "interests"; an event's start date from
    "starts_at" (or "event_date").
    """
    return InterestProfile(
        id=_record_id(record),
        topics=_parse_interests(record.get("interests")),
        starts_at=_optional_str(record.get("starts_at") or record.get("event_date")),
    )


def parse_candidates(records: List[Dict[str, Any]]) -> List[Candidate]:
    """Parse student records, skipping (and logging) the malformed ones."""
    return _parse_all(records, parse_candidate, "candidate")


def _parse_student(record: Dict[str, Any]) -> Tuple[Candidate, InterestProfile]:
    """One student record as both a ranking candidate and an interest profile."""
    return parse_candidate(record), parse_interest_profile(record)


def _parse_all(records, parse, kind: str) -> list:
    parsed = []
    skipped = 0
    for record in records:
        if not isinstance(record, dict):
            skipped += 1
            continue
        try:
            parsed.append(parse(record))
        except ValueError as e:
            logger.warning("[provider] RECORD_SKIPPED kind=%s reason=%s", kind, e)
            skipped += 1
    if skipped:
        logger.warning(
            "[provider] RECORDS_SKIPPED kind=%s skipped=%s parsed=%s",
            kind, skipped, len(parsed),
        )
    return parsed


# ============================================================
# PROVIDERS
# ============================================================

class CandidateProvider(Protocol):
    """Protocol for candidate, posting, and event access. Implement for in-memory or files."""

    def get_candidates(self) -> List[Candidate]:
        """All students as ranking candidates."""
        ...

    def get_posting(self, posting_id: str) -> Optional[Posting]:
        """One posting by id, or None."""
        ...

    def get_postings(self) -> List[Posting]:
        ...

    def get_student_profiles(self) -> List[InterestProfile]:
        """All students as weighted-interest profiles."""
        ...

    def get_event_profiles(self) -> List[InterestProfile]:
        ...


class InMemoryCandidateProvider:
    """
    Candidate provider backed by raw record lists.
    Used for tests and for callers that already hold the records.
    """

    def __init__(
        self,
        students: List[Dict[str, Any]],
        postings: Optional[List[Dict[str, Any]]] = None,
        events: Optional[List[Dict[str, Any]]] = None,
    ):
        parsed_students = _parse_all(students, _parse_student, "student")
        self._candidates = [candidate for candidate, _ in parsed_students]
        self._student_profiles = [profile for _, profile in parsed_students]
        self._postings = _parse_all(postings or [], parse_posting, "posting")
        self._posting_by_id = {p.id: p for p in self._postings}
        self._events = _parse_all(events or [], parse_interest_profile, "event")

    def get_candidates(self) -> List[Candidate]:
        return list(self._candidates)

    def get_posting(self, posting_id: str) -> Optional[Posting]:
        return self._posting_by_id.get(posting_id)

    def get_postings(self) -> List[Posting]:
        return list(self._postings)

    def get_student_profiles(self) -> List[InterestProfile]:
        return list(self._student_profiles)

    def get_event_profiles(self) -> List[InterestProfile]:
        return list(self._events)


def _load_json_list(path: Path, label: str) -> List[Dict[str, Any]]:
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{label} JSON must be a list of records: {path}")
    return data


class JsonCandidateProvider(InMemoryCandidateProvider):
    """
    Candidate provider backed by JSON files (students.json, postings.json, events.json).
    Paths come from Settings (STUDENTS_JSON_PATH, POSTINGS_JSON_PATH, EVENTS_JSON_PATH).

    Students are required. A postings path that is given must exist; without
    one the provider has no postings. A missing events file means no events.
    """

    def __init__(
        self,
        students_path: Union[Path, str],
        postings_path: Optional[Union[Path, str]] = None,
        events_path: Optional[Union[Path, str]] = None,
    ):
        self._students_path = Path(students_path)
        self._postings_path = Path(postings_path) if postings_path is not None else None
        if not self._students_path.exists():
            raise FileNotFoundError(f"Students JSON not found: {self._students_path}")
        postings: List[Dict[str, Any]] = []
        if self._postings_path is not None:
            if not self._postings_path.exists():
                raise FileNotFoundError(f"Postings JSON not found: {self._postings_path}")
            postings = _load_json_list(self._postings_path, "Postings")
        events: List[Dict[str, Any]] = []
        if events_path is not None and Path(events_path).exists():
            events = _load_json_list(Path(events_path), "Events")
        super().__init__(
            _load_json_list(self._students_path, "Students"),
            postings,
            events,
        )
        logger.info(
            "[provider] LOADED students=%s postings=%s events=%s",
            len(self._candidates), len(self._postings), len(self._events),
        )
