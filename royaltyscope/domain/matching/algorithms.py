"""Pure algorithms for song-to-work matching and confidence scoring.

These functions contain no I/O and implement the core business logic for
deciding how well a reported song matches a registered catalog work.
"""

from collections.abc import Iterable

from royaltyscope.domain.shared import clamp, compute_similarity

from .types import (
    CatalogWork,
    ConfidenceFactors,
    MatchResult,
    MatchResultsByKey,
    MatchType,
    SongRecord,
)

# Confidence scoring configuration
CONFIDENCE_CONFIG = {
    # Weights for fuzzy text signals
    "title_weight": 0.4,
    "artist_weight": 0.25,
    # Additive boosts for discrete signals
    "iswc_boost": 0.2,
    "aka_boost": 0.1,
    "writer_boost": 0.05,
    # Similarity thresholds (strictly greater than)
    "aka_threshold": 0.9,
    "writer_threshold": 0.8,
    # Confidence bounds
    "min_confidence": 0.0,
    "max_confidence": 1.0,
}

# Tier boundaries, evaluated top-down (inclusive lower bounds)
MATCH_TYPE_THRESHOLDS: tuple[tuple[float, MatchType], ...] = (
    (0.95, MatchType.EXACT),
    (0.80, MatchType.HIGH),
    (0.60, MatchType.MEDIUM),
)

# Reviewer-facing descriptions, evaluated top-down
CONFIDENCE_DESCRIPTIONS: tuple[tuple[float, str], ...] = (
    (0.95, "Exact match - Very high confidence"),
    (0.80, "High confidence match"),
    (0.60, "Medium confidence match"),
    (0.40, "Low confidence match"),
)

DEFAULT_REVIEW_MIN_CONFIDENCE = 0.3
DEFAULT_AUTO_LINK_MIN_CONFIDENCE = 0.6


def calculate_confidence_factors(
    song: SongRecord, work: CatalogWork
) -> ConfidenceFactors:
    """Compute the independent match signals for a song against a work.

    Missing ISWCs, AKAs or writers leave the corresponding signal at zero.
    """
    title_similarity = compute_similarity(song.title, work.title)

    # Best alternate-title similarity
    aka_similarity = max(
        (compute_similarity(song.title, aka) for aka in work.akas),
        default=0.0,
    )
    aka_match = aka_similarity > CONFIDENCE_CONFIG["aka_threshold"]

    iswc_match = bool(song.iswc and work.iswc and song.iswc == work.iswc)

    # Reported artist against every credited writer
    writer_similarities = [
        compute_similarity(song.artist, name) for name in work.writer_names
    ]
    artist_similarity = max(writer_similarities, default=0.0)
    writer_match = any(
        similarity > CONFIDENCE_CONFIG["writer_threshold"]
        for similarity in writer_similarities
    )

    return ConfidenceFactors(
        title_similarity=title_similarity,
        aka_similarity=aka_similarity,
        artist_similarity=artist_similarity,
        iswc_match=iswc_match,
        aka_match=aka_match,
        writer_match=writer_match,
    )


def calculate_confidence_score(factors: ConfidenceFactors) -> float:
    """Fuse the match signals into a single confidence in [0, 1].

    Title similarity carries the most weight; exact identifiers add fixed
    boosts so an ISWC match can dominate weak text signals.
    """
    score = 0.0
    score += factors.title_similarity * CONFIDENCE_CONFIG["title_weight"]
    score += factors.artist_similarity * CONFIDENCE_CONFIG["artist_weight"]

    if factors.iswc_match:
        score += CONFIDENCE_CONFIG["iswc_boost"]
    if factors.aka_match:
        score += CONFIDENCE_CONFIG["aka_boost"]
    if factors.writer_match:
        score += CONFIDENCE_CONFIG["writer_boost"]

    return clamp(
        score,
        CONFIDENCE_CONFIG["min_confidence"],
        CONFIDENCE_CONFIG["max_confidence"],
    )


def classify(confidence: float) -> MatchType:
    """Map a confidence score to its match tier."""
    for threshold, match_type in MATCH_TYPE_THRESHOLDS:
        if confidence >= threshold:
            return match_type
    return MatchType.LOW


# Name used by reviewer tooling
get_match_type = classify


def describe_confidence(confidence: float) -> str:
    """Human-readable description of a confidence score."""
    for threshold, description in CONFIDENCE_DESCRIPTIONS:
        if confidence >= threshold:
            return description
    return "Very low confidence match"


def score_candidate(song: SongRecord, work: CatalogWork) -> MatchResult:
    """Score one candidate work for a reported song."""
    factors = calculate_confidence_factors(song, work)
    confidence = calculate_confidence_score(factors)
    return MatchResult(
        work=work,
        confidence=confidence,
        factors=factors,
        match_type=classify(confidence),
    )


def find_potential_matches(
    song: SongRecord,
    candidates: Iterable[CatalogWork],
    min_confidence: float = DEFAULT_REVIEW_MIN_CONFIDENCE,
) -> list[MatchResult]:
    """Rank candidate works for a song, best first.

    Candidates scoring below min_confidence are dropped. The sort is stable,
    so equal confidences keep their input order.
    """
    matches = [
        result
        for result in (score_candidate(song, work) for work in candidates)
        if result.confidence >= min_confidence
    ]
    return sorted(matches, key=lambda m: m.confidence, reverse=True)


def get_best_match(
    song: SongRecord,
    candidates: Iterable[CatalogWork],
    min_confidence: float = DEFAULT_AUTO_LINK_MIN_CONFIDENCE,
) -> MatchResult | None:
    """Return the top-ranked candidate at or above min_confidence, if any."""
    matches = find_potential_matches(song, candidates, min_confidence)
    return matches[0] if matches else None


def batch_key(song: SongRecord) -> str:
    """Key used for batch results: lowercased "title-artist"."""
    return f"{song.title}-{song.artist}".lower()


def batch_match_songs(
    songs: Iterable[SongRecord],
    candidates: Iterable[CatalogWork],
    min_confidence: float = DEFAULT_AUTO_LINK_MIN_CONFIDENCE,
) -> MatchResultsByKey:
    """Find the best match for every song against the same candidate set.

    Songs sharing a key overwrite earlier entries, last one wins.
    """
    # Materialize once; candidates may be a one-shot iterator
    works = list(candidates)
    return {
        batch_key(song): get_best_match(song, works, min_confidence)
        for song in songs
    }
