"""Domain types for royalty pipeline valuation.

Inputs describe what is known about a song's metadata and registrations;
outputs are plain records that callers serialize as they see fit.
"""

from enum import StrEnum
from typing import Any

from attrs import define, field


class VerificationStatus(StrEnum):
    """How a song's metadata was established."""

    PRO_VERIFIED = "pro_verified"
    BMI_VERIFIED = "bmi_verified"  # Verified by an alternate PRO
    AI_GENERATED = "ai_generated"
    DISCOVERED = "discovered"
    UNKNOWN = "unknown"


VERIFIED_STATUSES = frozenset(
    {VerificationStatus.PRO_VERIFIED.value, VerificationStatus.BMI_VERIFIED.value}
)
UNVERIFIED_STATUSES = frozenset(
    {VerificationStatus.DISCOVERED.value, VerificationStatus.UNKNOWN.value}
)


class ConfidenceTier(StrEnum):
    """Reliability of a per-song estimate."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def _normalize_status(value: Any) -> str:
    if not value:
        return VerificationStatus.UNKNOWN.value
    return str(value).strip().lower()


def is_verified(status: Any) -> bool:
    """PRO-verified or verified by an alternate PRO."""
    return _normalize_status(status) in VERIFIED_STATUSES


@define(frozen=True, slots=True)
class SongMetaForPipeline:
    """Metadata snapshot for one catalog work.

    Completeness and verification status are supplied independently and may
    disagree, e.g. a complete record that nobody has verified.
    """

    id: str
    title: str = ""
    completeness_score: float | None = None
    verification_status: str = field(
        default=VerificationStatus.UNKNOWN.value, converter=_normalize_status
    )
    iswc: str | None = None
    publishers: dict[str, float] | None = None
    estimated_splits: dict[str, float] | None = None
    pro_registrations: dict[str, Any] | None = None

    @property
    def is_verified(self) -> bool:
        """Verified by a PRO or alternate PRO."""
        return is_verified(self.verification_status)

    @property
    def has_iswc(self) -> bool:
        return bool(self.iswc)

    @property
    def has_pro_registration(self) -> bool:
        return bool(self.pro_registrations)

    @property
    def has_estimated_splits(self) -> bool:
        return bool(self.estimated_splits)

    @property
    def has_publishers(self) -> bool:
        return bool(self.publishers)


@define(frozen=True, slots=True)
class RightTypeBreakdown:
    """Pipeline value split by royalty right type."""

    performance: float = 0.0
    mechanical: float = 0.0
    sync: float = 0.0

    @property
    def total(self) -> float:
        return self.performance + self.mechanical + self.sync

    def __add__(self, other: "RightTypeBreakdown") -> "RightTypeBreakdown":
        return RightTypeBreakdown(
            performance=self.performance + other.performance,
            mechanical=self.mechanical + other.mechanical,
            sync=self.sync + other.sync,
        )

    def as_dict(self) -> dict[str, float]:
        return {
            "performance": self.performance,
            "mechanical": self.mechanical,
            "sync": self.sync,
        }


@define(frozen=True, slots=True)
class ScenarioBands:
    """Conservative, base and optimistic catalog estimates."""

    low: float = 0.0
    base: float = 0.0
    high: float = 0.0

    def as_dict(self) -> dict[str, float]:
        return {"low": self.low, "base": self.base, "high": self.high}


@define(frozen=True, slots=True)
class SongPipelineResult:
    """Pipeline estimate for a single song.

    - monthly_net_r0: net monthly publishing revenue baseline
    - k: decay constant applied across the lag windows
    - base_pipeline: decayed revenue still in the collection pipeline
    - collectability: expected collected fraction in [0, 1]
    - collectible_pipeline: base_pipeline scaled by collectability
    """

    song_id: str
    title: str
    monthly_net_r0: float
    k: float
    base_pipeline: float
    collectability: float
    collectible_pipeline: float
    breakdown: RightTypeBreakdown
    confidence: ConfidenceTier

    def as_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "song_id": self.song_id,
            "title": self.title,
            "monthly_net_r0": self.monthly_net_r0,
            "k": self.k,
            "base_pipeline": self.base_pipeline,
            "collectability": self.collectability,
            "collectible_pipeline": self.collectible_pipeline,
            "breakdown": self.breakdown.as_dict(),
            "confidence": str(self.confidence),
        }


@define(frozen=True, slots=True)
class CatalogPipelineResult:
    """Aggregated pipeline estimate for a catalog."""

    total: float = 0.0
    breakdown: RightTypeBreakdown = field(factory=RightTypeBreakdown)
    scenario: ScenarioBands = field(factory=ScenarioBands)
    song_results: list[SongPipelineResult] = field(factory=list)
    confidence_score: int = 50

    def as_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "total": self.total,
            "breakdown": self.breakdown.as_dict(),
            "scenario": self.scenario.as_dict(),
            "confidence_score": self.confidence_score,
            "song_results": [result.as_dict() for result in self.song_results],
        }
