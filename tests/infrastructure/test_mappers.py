"""Tests for record mappers and JSON record loading."""

import json

import pytest

from royaltyscope.infrastructure.mappers import (
    RecordFormatError,
    catalog_work_from_dict,
    load_json_records,
    map_records,
    song_meta_from_dict,
    song_record_from_dict,
)


class TestSongRecordFromDict:
    """Test reported song mapping."""

    def test_snake_case(self):
        song = song_record_from_dict(
            {"title": "Paper Planes", "artist": "Maya Arul", "gross_amount": "12.5"}
        )

        assert song.title == "Paper Planes"
        assert song.artist == "Maya Arul"
        assert song.gross_amount == 12.5
        assert song.iswc is None

    def test_export_field_names(self):
        song = song_record_from_dict(
            {"songTitle": "Paper Planes", "artist_name": "Maya Arul", "grossAmount": 3}
        )
        assert song.title == "Paper Planes"
        assert song.gross_amount == 3.0

    def test_missing_artist_is_empty(self):
        assert song_record_from_dict({"title": "Solo"}).artist == ""

    def test_missing_title_rejected(self):
        with pytest.raises(RecordFormatError, match="title"):
            song_record_from_dict({"artist": "Maya Arul"})

    def test_bad_amount_rejected(self):
        with pytest.raises(RecordFormatError):
            song_record_from_dict({"title": "Paper Planes", "gross_amount": "lots"})

    def test_non_object_rejected(self):
        with pytest.raises(RecordFormatError, match="object"):
            song_record_from_dict(["Paper Planes"])


class TestCatalogWorkFromDict:
    """Test catalog work mapping."""

    def test_full_record(self):
        work = catalog_work_from_dict(
            {
                "id": 42,
                "work_title": "Midnight Dreams",
                "iswc": "T-123456789-0",
                "akas": ["Midnight Dreamz", ""],
                "copyright_writers": [
                    {"writer_name": "Alex Rivera", "share": 50, "writer_role": "composer"}
                ],
                "internal_id": "INT-7",
            }
        )

        assert work.id == "42"
        assert work.title == "Midnight Dreams"
        assert work.akas == ["Midnight Dreamz"]
        assert work.writers[0].name == "Alex Rivera"
        assert work.writers[0].ownership_percentage == 50.0
        assert work.writers[0].role == "composer"
        assert work.internal_id == "INT-7"

    def test_optional_fields_default_empty(self):
        work = catalog_work_from_dict({"id": "w-1", "title": "Midnight Dreams"})

        assert work.iswc is None
        assert work.akas == []
        assert work.writers == []

    def test_missing_id_rejected(self):
        with pytest.raises(RecordFormatError, match="id"):
            catalog_work_from_dict({"title": "Midnight Dreams"})


class TestSongMetaFromDict:
    """Test pipeline metadata mapping."""

    def test_export_field_names(self):
        meta = song_meta_from_dict(
            {
                "song_id": "s-1",
                "song_title": "Midnight Dreams",
                "metadata_completeness_score": 0.9,
                "verification_status": "PRO_VERIFIED",
                "pro_registrations": {"ASCAP": {}},
            }
        )

        assert meta.id == "s-1"
        assert meta.completeness_score == 0.9
        assert meta.is_verified
        assert meta.has_pro_registration

    def test_missing_status_is_unknown(self):
        meta = song_meta_from_dict({"id": "s-2"})

        assert meta.verification_status == "unknown"
        assert meta.completeness_score is None


class TestMapRecords:
    """Test bulk mapping."""

    def test_reports_record_index(self):
        records = [{"title": "A"}, {"artist": "No Title"}]
        with pytest.raises(RecordFormatError, match="Record 1"):
            map_records(records, song_record_from_dict)

    def test_maps_all(self):
        songs = map_records([{"title": "A"}, {"title": "B"}], song_record_from_dict)
        assert [song.title for song in songs] == ["A", "B"]


class TestLoadJsonRecords:
    """Test reading record files."""

    def test_plain_array(self, tmp_path):
        path = tmp_path / "songs.json"
        path.write_text(json.dumps([{"title": "A"}]), encoding="utf-8")
        assert load_json_records(path) == [{"title": "A"}]

    @pytest.mark.parametrize("wrapper", ["records", "data"])
    def test_wrapped_array(self, tmp_path, wrapper):
        path = tmp_path / "songs.json"
        path.write_text(json.dumps({wrapper: [{"title": "A"}]}), encoding="utf-8")
        assert load_json_records(path) == [{"title": "A"}]

    def test_non_array_rejected(self, tmp_path):
        path = tmp_path / "songs.json"
        path.write_text(json.dumps({"title": "A"}), encoding="utf-8")
        with pytest.raises(RecordFormatError):
            load_json_records(path)
