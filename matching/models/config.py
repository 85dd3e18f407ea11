"""
Matching configuration: match dispatch, digest, and feedback parameters.

MatchingConfig defaults are defined here. Scripts may pass a dict
(e.g. from a JSON file named by MATCHING_CONFIG_PATH); from_dict() merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, model_validator


class MatchingConfig(BaseModel):
    """Configuration for posting matches, digests, and interest feedback."""

    # -------------------------------------------------------------------------
    # Posting match (embedding / topic-overlap dispatch)
    # -------------------------------------------------------------------------

    # Matches scoring below this are dropped. None keeps every scored candidate.
    match_min_score: Optional[float] = None
    # Max matches returned per posting. None returns all.
    match_limit: Optional[int] = None

    # -------------------------------------------------------------------------
    # Event audience (weighted interest scoring)
    # -------------------------------------------------------------------------

    # Students scoring below this are left out of an event's audience.
    audience_threshold: float = 0.5

    # -------------------------------------------------------------------------
    # Weekly digest
    # -------------------------------------------------------------------------

    # Min weighted-interest score for an event to enter a student's digest.
    digest_min_score: float = 0.5
    # Max events per student per week.
    digest_top_n: int = 10

    # -------------------------------------------------------------------------
    # Interest feedback
    # new_weight = clamp(current + adjustment, 0, 1)
    # -------------------------------------------------------------------------

    feedback_strong_positive: float = 0.2
    feedback_positive: float = 0.1
    feedback_negative: float = -0.15
    # Starting weight for a topic the student has no weight for yet.
    feedback_default_weight: float = 0.3

    @model_validator(mode="after")
    def check_ranges(self):
        if self.match_limit is not None and self.match_limit < 1:
            raise ValueError(f"match_limit must be >= 1, got {self.match_limit}")
        if self.digest_top_n < 1:
            raise ValueError(f"digest_top_n must be >= 1, got {self.digest_top_n}")
        if not 0.0 <= self.feedback_default_weight <= 1.0:
            raise ValueError(
                f"feedback_default_weight must be within [0, 1], got {self.feedback_default_weight}"
            )
        return self

    @property
    def feedback_adjustments(self) -> Dict[str, float]:
        """Weight adjustment per feedback type."""
        return {
            "strong_positive": self.feedback_strong_positive,
            "positive": self.feedback_positive,
            "negative": self.feedback_negative,
        }

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "MatchingConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "match" in config_dict:
            m = config_dict["match"]
            if "min_score" in m:
                flat["match_min_score"] = m["min_score"]
            if "limit" in m:
                flat["match_limit"] = m["limit"]
        if "audience" in config_dict:
            a = config_dict["audience"]
            if "threshold" in a:
                flat["audience_threshold"] = a["threshold"]
        if "digest" in config_dict:
            d = config_dict["digest"]
            if "min_score" in d:
                flat["digest_min_score"] = d["min_score"]
            if "top_n" in d:
                flat["digest_top_n"] = d["top_n"]
        if "feedback" in config_dict:
            fb = config_dict["feedback"]
            for key in ("strong_positive", "positive", "negative", "default_weight"):
                if key in fb:
                    flat[f"feedback_{key}"] = fb[key]
        # Flat keys are accepted as-is
        flat.update({k: v for k, v in config_dict.items() if not isinstance(v, dict)})
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = MatchingConfig()


def resolve_config(config: Optional["MatchingConfig"]) -> "MatchingConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
