"""
Tests pour la source de catalogue JSON.
"""

import json
from pathlib import Path

import pytest

from src.adapters.catalog import JsonCatalogSource, build_record
from src.core.exceptions import CatalogLoadError, UnknownRegionError
from src.core.value_objects import Region


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestJsonCatalogSource:
    """Tests pour JsonCatalogSource."""

    def test_loads_array(self, tmp_path):
        path = _write(tmp_path / "catalog.json", [
            {"titleid": "0004000000054100", "name": "Super Mario 3D Land", "region": "EUR"},
            {"title_id": "0004000000054000", "name": "Super Mario 3D Land", "region": "USA"},
        ])
        records = JsonCatalogSource(path).load()
        assert [r.region for r in records] == [Region.EUR, Region.USA]

    def test_loads_releases_object(self, tmp_path):
        path = _write(tmp_path / "catalog.json", {
            "releases": [{"titleId": "0004000000033500", "name": "Zelda", "region": "usa"}],
        })
        records = JsonCatalogSource(path).load()
        assert records[0].title_id == "0004000000033500"
        assert records[0].region == Region.USA

    def test_skips_invalid_entries(self, tmp_path):
        path = _write(tmp_path / "catalog.json", [
            "not an object",
            {"titleid": "0004000000054100", "name": "", "region": "EUR"},
            {"titleid": "0004000000054100", "name": "Mario", "region": "EUR"},
        ])
        source = JsonCatalogSource(path)
        assert len(source.load()) == 1
        assert source.skipped == 2

    def test_malformed_json_raises(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            JsonCatalogSource(path).load()

    def test_wrong_root_type_raises(self, tmp_path):
        path = _write(tmp_path / "catalog.json", {"games": []})
        with pytest.raises(CatalogLoadError):
            JsonCatalogSource(path).load()


class TestBuildRecord:
    """Tests pour build_record."""

    def test_normalizes_title_id(self):
        record = build_record("0x00040000deadbeef", " Name ", "eur")
        assert record.title_id == "00040000DEADBEEF"
        assert record.name == "Name"
        assert record.region == Region.EUR

    def test_rejects_short_title_id(self):
        with pytest.raises(ValueError):
            build_record("ABC", "Name", "EUR")

    def test_rejects_unknown_region(self):
        with pytest.raises(UnknownRegionError):
            build_record("0004000000054100", "Name", "MARS")
