"""Catalog pipeline estimation use case.

Runs the valuation engine over a metadata set, optionally in chunks so large
catalogs can be processed incrementally. Chunking changes nothing about the
result: per-song estimates have no cross-song dependencies and aggregation
happens once over the full list.
"""

from attrs import define

from toolz import partition_all

from royaltyscope.config import get_logger
from royaltyscope.domain.pipeline import (
    DEFAULT_PIPELINE_CONFIG,
    CatalogPipelineResult,
    PipelineConfig,
    SongMetaForPipeline,
    SongPipelineResult,
    aggregate_song_results,
    compute_song_pipeline,
    validate_pipeline_config,
)

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class EstimatePipelineCommand:
    """Command for a catalog pipeline estimate."""

    songs: list[SongMetaForPipeline]
    config: PipelineConfig | None = None
    chunk_size: int | None = None

    def __attrs_post_init__(self) -> None:
        """Validate command parameters."""
        if self.chunk_size is not None and self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")


@define(slots=True)
class EstimatePipelineUseCase:
    """Use case for valuing the uncollected pipeline of a catalog."""

    def execute(self, command: EstimatePipelineCommand) -> CatalogPipelineResult:
        """Execute the estimate.

        Args:
            command: Song metadata, optional config and chunk size.

        Returns:
            Catalog-level pipeline result.
        """
        config = command.config or DEFAULT_PIPELINE_CONFIG
        songs = list(command.songs)

        with logger.contextualize(
            operation="estimate_pipeline", song_count=len(songs)
        ):
            # Malformed configs are computed as given; surface them in the log
            for problem in validate_pipeline_config(config):
                logger.warning(f"Pipeline config: {problem}")

            chunk_size = command.chunk_size or len(songs) or 1
            results: list[SongPipelineResult] = []
            for index, chunk in enumerate(partition_all(chunk_size, songs), start=1):
                results.extend(compute_song_pipeline(song, config) for song in chunk)
                logger.debug(f"Valued chunk {index} ({len(chunk)} songs)")

            catalog = aggregate_song_results(songs, results)
            logger.info(
                f"Pipeline estimate for {len(songs)} songs: "
                f"base={catalog.scenario.base:.2f} "
                f"confidence={catalog.confidence_score}"
            )
            return catalog
