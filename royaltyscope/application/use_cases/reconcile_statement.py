"""Statement reconciliation use case.

Resolves songs reported on an external statement or import to registered
catalog works, following the same command/result shape as the other use cases:
- Command carries the inputs and validates them on construction
- Use case orchestrates the pure matching engine and logs the outcome
- Result is a plain record ready for a review UI or serialization
"""

import time
from collections.abc import Mapping
from typing import Any

from attrs import define, field

from royaltyscope.config import get_logger
from royaltyscope.domain.matching import (
    CatalogWork,
    MatchResult,
    SongRecord,
    batch_key,
    find_potential_matches,
)
from royaltyscope.domain.matching.algorithms import (
    DEFAULT_AUTO_LINK_MIN_CONFIDENCE,
    DEFAULT_REVIEW_MIN_CONFIDENCE,
)
from royaltyscope.domain.pipeline import (
    DEFAULT_PIPELINE_CONFIG,
    CatalogPipelineResult,
    PipelineConfig,
    SongMetaForPipeline,
    compute_catalog_pipeline,
)

logger = get_logger(__name__)


def _check_floor(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {value}")


@define(frozen=True, slots=True)
class ReconcileStatementCommand:
    """Command for reconciling reported songs against a catalog.

    Songs scoring at or above min_confidence are linked automatically; songs
    that miss it keep their candidates at or above review_floor for review.
    """

    songs: list[SongRecord]
    catalog: list[CatalogWork]
    min_confidence: float = DEFAULT_AUTO_LINK_MIN_CONFIDENCE
    review_floor: float = DEFAULT_REVIEW_MIN_CONFIDENCE

    def __attrs_post_init__(self) -> None:
        """Validate command parameters."""
        _check_floor("min_confidence", self.min_confidence)
        _check_floor("review_floor", self.review_floor)
        if self.review_floor > self.min_confidence:
            raise ValueError(
                "review_floor cannot exceed min_confidence "
                f"({self.review_floor} > {self.min_confidence})"
            )


@define(frozen=True, slots=True)
class ReconcileStatementResult:
    """Outcome of a reconciliation run.

    matches is keyed like batch_match_songs: lowercased "title-artist". Lines
    sharing a key share one outcome: the strongest link any of them earned.
    matched_count, matched_gross and unmatched are derived from that outcome,
    and linked keys carry no review candidates.
    """

    matches: dict[str, MatchResult | None]
    review_candidates: dict[str, list[MatchResult]] = field(factory=dict)
    unmatched: list[SongRecord] = field(factory=list)
    song_count: int = 0
    matched_count: int = 0
    matched_gross: float = 0.0
    execution_time_ms: int = 0

    @property
    def linked_work_ids(self) -> list[str]:
        """Distinct work IDs that received an automatic link, in first-seen order."""
        seen: dict[str, None] = {}
        for result in self.matches.values():
            if result is not None:
                seen.setdefault(result.work.id, None)
        return list(seen)

    def as_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "song_count": self.song_count,
            "matched_count": self.matched_count,
            "matched_gross": self.matched_gross,
            "matches": {
                key: result.as_dict() if result else None
                for key, result in self.matches.items()
            },
            "review_candidates": {
                key: [candidate.as_dict() for candidate in candidates]
                for key, candidates in self.review_candidates.items()
            },
            "unmatched": [
                {"title": song.title, "artist": song.artist, "iswc": song.iswc}
                for song in self.unmatched
            ],
        }


@define(slots=True)
class ReconcileStatementUseCase:
    """Use case for back-catalog and statement reconciliation.

    Each song is scored independently against the shared catalog, so the work
    is trivially divisible; callers with very large statements chunk upstream.
    """

    def execute(self, command: ReconcileStatementCommand) -> ReconcileStatementResult:
        """Execute reconciliation.

        Args:
            command: Songs, catalog and confidence floors.

        Returns:
            Automatic links, review candidates and unmatched songs.
        """
        start_time = time.time()

        with logger.contextualize(
            operation="reconcile_statement",
            song_count=len(command.songs),
            catalog_size=len(command.catalog),
        ):
            logger.info(
                f"Reconciling {len(command.songs)} songs against "
                f"{len(command.catalog)} catalog works"
            )

            matches: dict[str, MatchResult | None] = {}
            rankings: dict[str, list[MatchResult]] = {}

            for song in command.songs:
                key = batch_key(song)
                # One ranking at the review floor serves both decisions
                ranked = find_potential_matches(
                    song, command.catalog, command.review_floor
                )
                best = (
                    ranked[0]
                    if ranked and ranked[0].confidence >= command.min_confidence
                    else None
                )

                # Repeated statement lines share a key; the strongest link wins
                current = matches.get(key)
                if current is None or (
                    best is not None and best.confidence > current.confidence
                ):
                    matches[key] = best
                if ranked and (
                    key not in rankings
                    or ranked[0].confidence > rankings[key][0].confidence
                ):
                    rankings[key] = ranked

            review_candidates = {
                key: ranked
                for key, ranked in rankings.items()
                if matches[key] is None
            }
            linked = [
                song for song in command.songs if matches[batch_key(song)] is not None
            ]
            unmatched = [
                song for song in command.songs if matches[batch_key(song)] is None
            ]
            matched_count = len(linked)
            matched_gross = sum(song.gross_amount or 0.0 for song in linked)

            execution_time_ms = int((time.time() - start_time) * 1000)
            logger.info(
                f"Reconciliation complete: {matched_count}/{len(command.songs)} linked, "
                f"{len(review_candidates)} need review"
            )

            return ReconcileStatementResult(
                matches=matches,
                review_candidates=review_candidates,
                unmatched=unmatched,
                song_count=len(command.songs),
                matched_count=matched_count,
                matched_gross=matched_gross,
                execution_time_ms=execution_time_ms,
            )


def value_matched_works(
    result: ReconcileStatementResult,
    metadata_by_work_id: Mapping[str, SongMetaForPipeline],
    config: PipelineConfig = DEFAULT_PIPELINE_CONFIG,
) -> CatalogPipelineResult:
    """Value the works a reconciliation linked, using their cached metadata.

    Linked works with no metadata entry are skipped and logged.
    """
    work_ids = result.linked_work_ids
    songs = [metadata_by_work_id[wid] for wid in work_ids if wid in metadata_by_work_id]

    missing = len(work_ids) - len(songs)
    if missing:
        logger.warning(f"No pipeline metadata for {missing} linked works; skipped")

    return compute_catalog_pipeline(songs, config)
