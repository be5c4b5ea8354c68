"""Record mappers for converting between plain records and domain types.

Catalog stores, statement importers and metadata caches hand us dicts (often
decoded JSON). These mappers accept both this project's snake_case field
names and the field names used by the upstream catalog export
(``songTitle``, ``work_title``, ``copyright_writers``...).
"""

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from royaltyscope.config import get_logger
from royaltyscope.domain.matching import CatalogWork, SongRecord, WriterCredit
from royaltyscope.domain.pipeline import SongMetaForPipeline

logger = get_logger(__name__)


class RecordFormatError(ValueError):
    """A record is missing a required field or has the wrong shape."""


def _first(record: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Value of the first key present with a non-None value."""
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return default


def _required(record: Mapping[str, Any], kind: str, *keys: str) -> Any:
    value = _first(record, *keys)
    if value is None or value == "":
        raise RecordFormatError(f"{kind} record is missing '{keys[0]}': {record!r}")
    return value


def _optional_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise RecordFormatError(f"Expected a number, got {value!r}") from e


def _as_mapping(record: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise RecordFormatError(f"{kind} record must be an object, got {type(record).__name__}")
    return record


def song_record_from_dict(record: Mapping[str, Any]) -> SongRecord:
    """Build a reported SongRecord."""
    record = _as_mapping(record, "Song")
    return SongRecord(
        title=str(_required(record, "Song", "title", "songTitle", "song_title")),
        artist=str(_first(record, "artist", "artist_name", default="")),
        iswc=_first(record, "iswc") or None,
        gross_amount=_optional_float(
            _first(record, "gross_amount", "grossAmount")
        ),
    )


def writer_credit_from_dict(record: Mapping[str, Any]) -> WriterCredit:
    """Build a WriterCredit."""
    record = _as_mapping(record, "Writer")
    return WriterCredit(
        name=str(_required(record, "Writer", "name", "writer_name")),
        ownership_percentage=_optional_float(
            _first(record, "ownership_percentage", "share")
        )
        or 0.0,
        role=str(_first(record, "role", "writer_role", default="")),
    )


def catalog_work_from_dict(record: Mapping[str, Any]) -> CatalogWork:
    """Build a CatalogWork."""
    record = _as_mapping(record, "Work")
    writers = _first(record, "writers", "copyright_writers", default=[])
    akas = _first(record, "akas", default=[])
    return CatalogWork(
        id=str(_required(record, "Work", "id")),
        title=str(_required(record, "Work", "title", "work_title")),
        iswc=_first(record, "iswc") or None,
        akas=[str(aka) for aka in akas if aka],
        writers=[writer_credit_from_dict(writer) for writer in writers],
        internal_id=_first(record, "internal_id"),
    )


def song_meta_from_dict(record: Mapping[str, Any]) -> SongMetaForPipeline:
    """Build a SongMetaForPipeline."""
    record = _as_mapping(record, "Song metadata")
    return SongMetaForPipeline(
        id=str(_required(record, "Song metadata", "id", "song_id")),
        title=str(_first(record, "title", "song_title", default="")),
        completeness_score=_optional_float(
            _first(record, "completeness_score", "metadata_completeness_score")
        ),
        verification_status=_first(record, "verification_status"),
        iswc=_first(record, "iswc") or None,
        publishers=_first(record, "publishers"),
        estimated_splits=_first(record, "estimated_splits"),
        pro_registrations=_first(record, "pro_registrations"),
    )


def map_records(records: Iterable[Any], mapper) -> list:
    """Apply a mapper to each record, reporting the index of a bad record."""
    mapped = []
    for index, record in enumerate(records):
        try:
            mapped.append(mapper(record))
        except RecordFormatError as e:
            raise RecordFormatError(f"Record {index}: {e}") from e
    return mapped


def load_json_records(path: Path) -> list[Any]:
    """Read a JSON array of records from disk."""
    with path.open(encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, Mapping):
        # Accept {"records": [...]} wrappers from catalog exports
        data = data.get("records", data.get("data"))
    if not isinstance(data, list):
        raise RecordFormatError(f"{path} must contain a JSON array of records")

    logger.debug(f"Loaded {len(data)} records from {path}")
    return data
