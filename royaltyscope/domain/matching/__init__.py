"""Song-to-work matching algorithms and types for catalog reconciliation."""

from .algorithms import (
    CONFIDENCE_CONFIG,
    MATCH_TYPE_THRESHOLDS,
    batch_key,
    batch_match_songs,
    calculate_confidence_factors,
    calculate_confidence_score,
    classify,
    describe_confidence,
    find_potential_matches,
    get_best_match,
    get_match_type,
    score_candidate,
)
from .types import (
    CatalogWork,
    ConfidenceFactors,
    MatchResult,
    MatchResultsByKey,
    MatchType,
    SongRecord,
    WriterCredit,
)

__all__ = [
    "CONFIDENCE_CONFIG",
    "MATCH_TYPE_THRESHOLDS",
    "CatalogWork",
    "ConfidenceFactors",
    "MatchResult",
    "MatchResultsByKey",
    "MatchType",
    "SongRecord",
    "WriterCredit",
    "batch_key",
    "batch_match_songs",
    "calculate_confidence_factors",
    "calculate_confidence_score",
    "classify",
    "describe_confidence",
    "find_potential_matches",
    "get_best_match",
    "get_match_type",
    "score_candidate",
]
