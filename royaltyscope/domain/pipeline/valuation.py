"""Deterministic royalty pipeline valuation.

Estimates revenue already earned but not yet collected for each song, from
metadata completeness and registration signals, then aggregates to catalog
level. Every rule is an explicit heuristic so the estimate stays auditable:
there is no ground-truth revenue at estimation time.
"""

from collections.abc import Iterable
import math

from royaltyscope.config import get_logger
from royaltyscope.domain.shared import clamp, round_half_up

from .config import DEFAULT_PIPELINE_CONFIG, PipelineConfig
from .types import (
    UNVERIFIED_STATUSES,
    CatalogPipelineResult,
    ConfidenceTier,
    RightTypeBreakdown,
    ScenarioBands,
    SongMetaForPipeline,
    SongPipelineResult,
)

logger = get_logger(__name__)

# (minimum completeness, verified annual gross, unverified annual gross)
ANNUAL_GROSS_TABLE: tuple[tuple[float, float, float], ...] = (
    (0.85, 1400.0, 1200.0),
    (0.70, 800.0, 600.0),
    (0.50, 300.0, 250.0),
)
ANNUAL_GROSS_FLOOR: tuple[float, float] = (150.0, 100.0)

# Completeness assumed for pricing when a song has no score at all
DEFAULT_COMPLETENESS = 0.6

COLLECTABILITY_PENALTIES = {
    "no_pro_registration": 0.7,
    "no_iswc": 0.8,
    "no_estimated_splits": 0.85,
    "no_publishers": 0.9,
    "unverified_without_iswc": 0.8,
}
VERIFIED_COLLECTABILITY_BONUS = 1.1

DECAY_ADJUSTMENTS = {
    "verified": -0.02,
    "no_iswc": 0.04,
    "low_completeness": 0.03,
}
LOW_COMPLETENESS_THRESHOLD = 0.6

HIGH_CONFIDENCE_COMPLETENESS = 0.75
MEDIUM_CONFIDENCE_COMPLETENESS = 0.6

# Fixed uncertainty band around the base estimate
SCENARIO_LOW_FACTOR = 0.8
SCENARIO_HIGH_FACTOR = 1.2

# Catalog confidence score components (0..100)
CATALOG_CONFIDENCE_CONFIG = {
    "base": 50,
    "completeness_points": 20,
    "depth_songs_per_point": 10,
    "depth_max_points": 10,
    "any_verified_points": 10,
    "any_iswc_points": 8,
    "any_splits_points": 8,
    "min_score": 0,
    "max_score": 100,
}


def estimate_annual_gross_from_completeness(score: float, verified: bool) -> float:
    """Look up the annual gross anchor for a completeness score."""
    for threshold, verified_value, unverified_value in ANNUAL_GROSS_TABLE:
        if score >= threshold:
            return verified_value if verified else unverified_value
    verified_floor, unverified_floor = ANNUAL_GROSS_FLOOR
    return verified_floor if verified else unverified_floor


def collectability_factor(song: SongMetaForPipeline) -> float:
    """Expected fraction of owed royalties that will actually be collected.

    Each missing registration signal compounds a penalty. Unverified works
    without an ISWC take a further leakage penalty on top of the ISWC one.
    """
    factor = 1.0

    if not song.has_pro_registration:
        factor *= COLLECTABILITY_PENALTIES["no_pro_registration"]
    if not song.has_iswc:
        factor *= COLLECTABILITY_PENALTIES["no_iswc"]
    if not song.has_estimated_splits:
        factor *= COLLECTABILITY_PENALTIES["no_estimated_splits"]
    if not song.has_publishers:
        factor *= COLLECTABILITY_PENALTIES["no_publishers"]

    if song.is_verified:
        factor = min(1.0, factor * VERIFIED_COLLECTABILITY_BONUS)

    if song.verification_status in UNVERIFIED_STATUSES and not song.has_iswc:
        factor *= COLLECTABILITY_PENALTIES["unverified_without_iswc"]

    return clamp(factor, 0.0, 1.0)


def confidence_from_song(song: SongMetaForPipeline) -> ConfidenceTier:
    """Reliability tier of a song's estimate.

    Independent of collectability: this rates the estimate, not the leakage.
    """
    score = song.completeness_score if song.completeness_score is not None else 0.0
    if song.is_verified and score >= HIGH_CONFIDENCE_COMPLETENESS:
        return ConfidenceTier.HIGH
    if score >= MEDIUM_CONFIDENCE_COMPLETENESS:
        return ConfidenceTier.MEDIUM
    return ConfidenceTier.LOW


def compute_decay_constant(
    song: SongMetaForPipeline, config: PipelineConfig = DEFAULT_PIPELINE_CONFIG
) -> float:
    """Per-song decay constant, clamped to the configured bounds."""
    completeness = (
        song.completeness_score
        if song.completeness_score is not None
        else DEFAULT_COMPLETENESS
    )

    k = config.decay.base_k
    if song.is_verified:
        k += DECAY_ADJUSTMENTS["verified"]
    if not song.has_iswc:
        k += DECAY_ADJUSTMENTS["no_iswc"]
    if completeness < LOW_COMPLETENESS_THRESHOLD:
        k += DECAY_ADJUSTMENTS["low_completeness"]

    return clamp(k, config.decay.min_k, config.decay.max_k)


def _decayed_window(monthly: float, k: float, months: int) -> float:
    return sum(monthly * math.exp(-k * month) for month in range(1, months + 1))


def compute_song_pipeline(
    song: SongMetaForPipeline, config: PipelineConfig = DEFAULT_PIPELINE_CONFIG
) -> SongPipelineResult:
    """Estimate the uncollected royalty pipeline for one song.

    Args:
        song: Metadata snapshot for the work
        config: Valuation options; never mutated

    Returns:
        Per-song result with baseline, decay, collectability and breakdown
    """
    completeness = (
        song.completeness_score
        if song.completeness_score is not None
        else DEFAULT_COMPLETENESS
    )

    # Net monthly publishing revenue after platform fee and share factor
    annual_gross = estimate_annual_gross_from_completeness(
        completeness, song.is_verified
    )
    monthly_net_r0 = (
        (annual_gross / 12)
        * (1 - config.platform_fee)
        * config.publishing_share_factor
    )

    k = compute_decay_constant(song, config)

    # Decayed revenue across each territory's lag window, weighted by territory
    base_pipeline = (
        _decayed_window(monthly_net_r0, k, config.lag_months.domestic)
        * config.territory_weights.domestic
        + _decayed_window(monthly_net_r0, k, config.lag_months.international)
        * config.territory_weights.international
    )

    collectability = collectability_factor(song)
    collectible = base_pipeline * collectability

    weights = config.right_type_weights
    breakdown = RightTypeBreakdown(
        performance=collectible * weights.performance,
        mechanical=collectible * weights.mechanical,
        sync=collectible * weights.sync,
    )

    return SongPipelineResult(
        song_id=song.id,
        title=song.title,
        monthly_net_r0=monthly_net_r0,
        k=k,
        base_pipeline=base_pipeline,
        collectability=collectability,
        collectible_pipeline=collectible,
        breakdown=breakdown,
        confidence=confidence_from_song(song),
    )


def catalog_confidence_score(songs: list[SongMetaForPipeline]) -> int:
    """Overall 0-100 confidence for a catalog estimate.

    An empty catalog scores exactly the base.
    """
    cfg = CATALOG_CONFIDENCE_CONFIG
    score = cfg["base"]
    if not songs:
        return score

    avg_completeness = sum(
        song.completeness_score or 0.0 for song in songs
    ) / len(songs)

    score += round_half_up(avg_completeness * cfg["completeness_points"])
    score += min(cfg["depth_max_points"], len(songs) // cfg["depth_songs_per_point"])
    if any(song.is_verified for song in songs):
        score += cfg["any_verified_points"]
    if any(song.has_iswc for song in songs):
        score += cfg["any_iswc_points"]
    if any(song.has_estimated_splits for song in songs):
        score += cfg["any_splits_points"]

    return int(clamp(score, cfg["min_score"], cfg["max_score"]))


def scenario_bands(base: float) -> ScenarioBands:
    """Fixed +/-20% band around the base estimate."""
    return ScenarioBands(
        low=base * SCENARIO_LOW_FACTOR,
        base=base,
        high=base * SCENARIO_HIGH_FACTOR,
    )


def aggregate_song_results(
    songs: list[SongMetaForPipeline], results: list[SongPipelineResult]
) -> CatalogPipelineResult:
    """Combine per-song results into a catalog estimate."""
    total = sum(result.collectible_pipeline for result in results)
    breakdown = sum(
        (result.breakdown for result in results), start=RightTypeBreakdown()
    )
    return CatalogPipelineResult(
        total=total,
        breakdown=breakdown,
        scenario=scenario_bands(total),
        song_results=results,
        confidence_score=catalog_confidence_score(songs),
    )


def compute_catalog_pipeline(
    songs: Iterable[SongMetaForPipeline],
    config: PipelineConfig = DEFAULT_PIPELINE_CONFIG,
) -> CatalogPipelineResult:
    """Estimate the uncollected royalty pipeline for a whole catalog.

    Args:
        songs: Metadata for every work in the catalog (may be empty)
        config: Valuation options; never mutated

    Returns:
        Totals, right-type breakdown, scenario bands, per-song results
        and an overall confidence score
    """
    song_list = list(songs)
    results = [compute_song_pipeline(song, config) for song in song_list]
    catalog = aggregate_song_results(song_list, results)

    logger.debug(
        f"Valued {len(song_list)} songs: total={catalog.total:.2f} "
        f"confidence={catalog.confidence_score}"
    )
    return catalog
