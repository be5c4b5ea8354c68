"""Royalty pipeline valuation: types, configuration and the valuation engine."""

from .config import (
    DEFAULT_PIPELINE_CONFIG,
    DecayBounds,
    LagMonths,
    PipelineConfig,
    RightTypeWeights,
    TerritoryWeights,
    validate_pipeline_config,
)
from .types import (
    CatalogPipelineResult,
    ConfidenceTier,
    RightTypeBreakdown,
    ScenarioBands,
    SongMetaForPipeline,
    SongPipelineResult,
    VerificationStatus,
    is_verified,
)
from .valuation import (
    ANNUAL_GROSS_TABLE,
    aggregate_song_results,
    catalog_confidence_score,
    collectability_factor,
    compute_catalog_pipeline,
    compute_decay_constant,
    compute_song_pipeline,
    confidence_from_song,
    estimate_annual_gross_from_completeness,
)

__all__ = [
    "ANNUAL_GROSS_TABLE",
    "DEFAULT_PIPELINE_CONFIG",
    "CatalogPipelineResult",
    "ConfidenceTier",
    "DecayBounds",
    "LagMonths",
    "PipelineConfig",
    "RightTypeBreakdown",
    "RightTypeWeights",
    "ScenarioBands",
    "SongMetaForPipeline",
    "SongPipelineResult",
    "TerritoryWeights",
    "VerificationStatus",
    "aggregate_song_results",
    "catalog_confidence_score",
    "collectability_factor",
    "compute_catalog_pipeline",
    "compute_decay_constant",
    "compute_song_pipeline",
    "confidence_from_song",
    "estimate_annual_gross_from_completeness",
    "is_verified",
    "validate_pipeline_config",
]
