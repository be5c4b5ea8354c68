"""royaltyscope domain layer - pure business logic with no I/O."""

from . import matching, pipeline, shared

# Re-export key types for convenience
from .matching import (
    CatalogWork,
    MatchResult,
    MatchType,
    SongRecord,
    WriterCredit,
    batch_match_songs,
    find_potential_matches,
    get_best_match,
)
from .pipeline import (
    DEFAULT_PIPELINE_CONFIG,
    CatalogPipelineResult,
    PipelineConfig,
    SongMetaForPipeline,
    SongPipelineResult,
    compute_catalog_pipeline,
    compute_song_pipeline,
)
from .shared import compute_similarity, normalize_text

__all__ = [
    # Modules
    "matching",
    "pipeline",
    "shared",
    # Matching
    "CatalogWork",
    "MatchResult",
    "MatchType",
    "SongRecord",
    "WriterCredit",
    "batch_match_songs",
    "find_potential_matches",
    "get_best_match",
    # Pipeline
    "DEFAULT_PIPELINE_CONFIG",
    "CatalogPipelineResult",
    "PipelineConfig",
    "SongMetaForPipeline",
    "SongPipelineResult",
    "compute_catalog_pipeline",
    "compute_song_pipeline",
    # Shared
    "compute_similarity",
    "normalize_text",
]
