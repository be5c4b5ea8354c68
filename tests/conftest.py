"""Shared test fixtures - Pure business objects with no dependencies.

Fast creation, no external dependencies, function-scoped for isolation.
"""

import pytest

from royaltyscope.domain.matching import CatalogWork, SongRecord, WriterCredit
from royaltyscope.domain.pipeline import SongMetaForPipeline, VerificationStatus


@pytest.fixture
def reported_song():
    """Song as it appears on an incoming statement."""
    return SongRecord(
        title="Midnight Dreams",
        artist="Alex Rivera",
        iswc="T-123456789-0",
        gross_amount=125.50,
    )


@pytest.fixture
def midnight_dreams_work():
    """Catalog work matching the reported song on every signal."""
    return CatalogWork(
        id="w-1",
        title="Midnight Dreams",
        iswc="T-123456789-0",
        akas=["Midnight Dreamz"],
        writers=[
            WriterCredit(name="Alex Rivera", ownership_percentage=50.0, role="composer"),
            WriterCredit(name="Jordan Blake", ownership_percentage=50.0, role="lyricist"),
        ],
    )


@pytest.fixture
def catalog(midnight_dreams_work):
    """Small catalog with one strong candidate and two unrelated works."""
    return [
        CatalogWork(
            id="w-2",
            title="Paper Planes",
            writers=[WriterCredit(name="Maya Arul")],
        ),
        midnight_dreams_work,
        CatalogWork(id="w-3", title="Quiet Harbour"),
    ]


@pytest.fixture
def bare_work():
    """Catalog work with no optional fields at all."""
    return CatalogWork(id="w-bare", title="Midnight Dreams")


@pytest.fixture
def verified_song_meta():
    """Fully registered, PRO-verified song."""
    return SongMetaForPipeline(
        id="s-1",
        title="Midnight Dreams",
        completeness_score=0.9,
        verification_status=VerificationStatus.PRO_VERIFIED,
        iswc="T-000000001-1",
        publishers={"Rivera Songs": 100.0},
        estimated_splits={"Alex Rivera": 50.0, "Jordan Blake": 50.0},
        pro_registrations={"ASCAP": {"work_id": "123"}},
    )


@pytest.fixture
def discovered_song_meta():
    """Song discovered in the wild with no registrations."""
    return SongMetaForPipeline(
        id="s-2",
        title="Found Footage",
        completeness_score=0.4,
        verification_status="discovered",
    )


@pytest.fixture
def song_meta_factory():
    """Build catalog songs with controlled verification and ISWC signals."""

    def make(index: int, *, verified: bool, with_iswc: bool, completeness: float = 0.7):
        return SongMetaForPipeline(
            id=f"s-{index}",
            title=f"Song {index}",
            completeness_score=completeness,
            verification_status="pro_verified" if verified else "unknown",
            iswc=f"T-{index:09d}-0" if with_iswc else None,
        )

    return make
