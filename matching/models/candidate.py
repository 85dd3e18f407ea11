"""
Candidate and posting models: typed representations used by the ranking stages.

Raw stored records are parsed into these at the data-access boundary
(see services.candidate_provider); the ranking code assumes well-typed values.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Candidate(BaseModel):
    """
    A student profile being scored against a posting.

    topics keep their stored order for display; order does not affect scoring.
    embedding is None when no vector was generated for the profile.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    topics: List[str] = Field(default_factory=list)
    embedding: Optional[List[float]] = None

    @property
    def has_embedding(self) -> bool:
        return bool(self.embedding)


class Posting(BaseModel):
    """An opportunity posting; the query side of a match."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: Optional[str] = None
    topics: List[str] = Field(default_factory=list)
    embedding: Optional[List[float]] = None
