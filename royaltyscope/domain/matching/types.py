"""Pure domain types for song-to-work matching and confidence scoring.

Reported songs arrive from statements and imports; catalog works are the
registered compositions they are reconciled against.
"""

from enum import StrEnum
from typing import Any

from attrs import define, field, validators


class MatchType(StrEnum):
    """Categorical tier for a match confidence."""

    EXACT = "exact"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@define(frozen=True, slots=True)
class SongRecord:
    """A song as reported by an external statement or import."""

    title: str = field(validator=validators.instance_of(str))
    artist: str = field(default="", converter=lambda v: v or "")
    iswc: str | None = field(default=None)
    gross_amount: float | None = field(default=None)


@define(frozen=True, slots=True)
class WriterCredit:
    """A writer credited on a catalog work."""

    name: str
    ownership_percentage: float = 0.0
    role: str = ""


@define(frozen=True, slots=True)
class CatalogWork:
    """Registered composition in the catalog.

    Owned by the catalog store; the matching engine only reads it.
    """

    id: str
    title: str
    iswc: str | None = None
    akas: list[str] = field(factory=list)
    writers: list[WriterCredit] = field(factory=list)
    internal_id: str | None = None

    @property
    def writer_names(self) -> list[str]:
        """Names of all credited writers, in credit order."""
        return [writer.name for writer in self.writers]


@define(frozen=True, slots=True)
class ConfidenceFactors:
    """Independent signals used to score a song against a work.

    Captures how a confidence score was reached so reviewers can see
    why a candidate ranked where it did.
    """

    title_similarity: float = 0.0
    aka_similarity: float = 0.0
    artist_similarity: float = 0.0
    iswc_match: bool = False
    aka_match: bool = False
    writer_match: bool = False

    def as_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "title_similarity": round(self.title_similarity, 4),
            "aka_similarity": round(self.aka_similarity, 4),
            "artist_similarity": round(self.artist_similarity, 4),
            "iswc_match": self.iswc_match,
            "aka_match": self.aka_match,
            "writer_match": self.writer_match,
        }


@define(frozen=True, slots=True)
class MatchResult:
    """A candidate work with its confidence, evidence and tier."""

    work: CatalogWork
    confidence: float
    factors: ConfidenceFactors
    match_type: MatchType

    def as_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "work_id": self.work.id,
            "work_title": self.work.title,
            "iswc": self.work.iswc,
            "confidence": round(self.confidence, 4),
            "match_type": str(self.match_type),
            "factors": self.factors.as_dict(),
        }


# Type alias for batch results keyed by "title-artist"
MatchResultsByKey = dict[str, MatchResult | None]
