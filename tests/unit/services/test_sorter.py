"""
Tests unitaires pour SorterService.

Verifie l'orchestration decodage -> recherche -> resolution -> copie,
la gestion des erreurs par fichier et le mode dry-run.
"""

from pathlib import Path

import pytest

from src.core.entities import CatalogRecord
from src.core.value_objects import ContainerFormat, Region
from src.services.catalog_index import CatalogIndex
from src.services.header_decoder import HeaderDecoder
from src.services.region_resolver import RegionResolver
from src.services.renamer import OutputNaming
from src.services.sorter import SorterService, SortResult, SortStatus, SortSummary

OUTPUT = Path("/output")


# ====================
# Fixtures
# ====================


@pytest.fixture
def make_sorter(mock_file_system, catalog_records):
    """Fabrique un SorterService avec le mock de systeme de fichiers."""

    def _make(dry_run: bool = False, records=None, priority=None) -> SorterService:
        return SorterService(
            file_system=mock_file_system,
            decoder=HeaderDecoder(file_system=mock_file_system),
            catalog=CatalogIndex(catalog_records if records is None else records),
            resolver=RegionResolver(priority or [Region.EUR, Region.USA, Region.JPN]),
            naming=OutputNaming(),
            output_dir=OUTPUT,
            dry_run=dry_run,
        )

    return _make


# ====================
# Tests sort_file
# ====================


class TestSortFile:
    """Tests du traitement d'un fichier."""

    def test_copies_preferred_region(self, make_sorter, mock_file_system):
        """La variante EUR est copiee sous son nom nettoye."""
        result = make_sorter().sort_file(Path("/input/mario.3ds"))

        assert result.status == SortStatus.COPIED
        assert [w.region for w in result.winners] == [Region.EUR]
        assert result.destinations == [OUTPUT / "Super Mario 3D Land (EUR).3ds"]
        mock_file_system.copy.assert_called_once_with(
            Path("/input/mario.3ds"), OUTPUT / "Super Mario 3D Land (EUR).3ds"
        )

    def test_suffix_follows_decoded_format(
        self, make_sorter, mock_file_system, header_factory
    ):
        """Un fichier .3ds contenant un NCCH recoit le suffixe CIA."""
        mock_file_system.read_prefix.return_value = header_factory(
            ContainerFormat.NCCH, "0004000000033500"
        )
        result = make_sorter().sort_file(Path("/input/zelda.3ds"))

        assert result.status == SortStatus.COPIED
        assert result.destinations == [
            OUTPUT / "The Legend of Zelda Ocarina of Time 3D.standard.cia"
        ]

    def test_dry_run_does_not_copy(self, make_sorter, mock_file_system):
        result = make_sorter(dry_run=True).sort_file(Path("/input/mario.3ds"))

        assert result.status == SortStatus.MATCHED
        assert result.destinations == [OUTPUT / "Super Mario 3D Land (EUR).3ds"]
        mock_file_system.copy.assert_not_called()

    def test_unknown_title_id_is_no_match(
        self, make_sorter, mock_file_system, header_factory
    ):
        mock_file_system.read_prefix.return_value = header_factory(
            ContainerFormat.NCSD, "00040000DEADBEEF"
        )
        result = make_sorter().sort_file(Path("/input/unknown.3ds"))

        assert result.status == SortStatus.NO_MATCH
        assert result.header_info.title_id == "00040000DEADBEEF"
        mock_file_system.copy.assert_not_called()

    def test_no_preferred_region_is_no_match(self, make_sorter, mock_file_system):
        records = [
            CatalogRecord("0004000000054100", "Mario KOR", Region.KOR),
            CatalogRecord("0004000000054100", "Mario CHN", Region.CHN),
        ]
        result = make_sorter(records=records).sort_file(Path("/input/mario.3ds"))

        assert result.status == SortStatus.NO_MATCH
        mock_file_system.copy.assert_not_called()

    def test_single_candidate_any_region(self, make_sorter):
        records = [CatalogRecord("0004000000054100", "Mario KOR", Region.KOR)]
        result = make_sorter(records=records).sort_file(Path("/input/mario.3ds"))

        assert result.status == SortStatus.COPIED
        assert result.destinations == [OUTPUT / "Mario KOR.3ds"]


class TestSortFileErrors:
    """Erreurs recuperees a la frontiere du fichier."""

    def test_truncated_header(self, make_sorter, mock_file_system):
        mock_file_system.read_prefix.return_value = b"\x00" * 32
        result = make_sorter().sort_file(Path("/input/short.cia"))

        assert result.status == SortStatus.ERROR
        assert result.header_info is None
        assert "tronque" in result.error

    def test_unrecognized_format(self, make_sorter, mock_file_system, header_factory):
        mock_file_system.read_prefix.return_value = header_factory(None, "0004000000054100")
        result = make_sorter().sort_file(Path("/input/garbage.cia"))

        assert result.status == SortStatus.ERROR

    def test_unreadable_file(self, make_sorter, mock_file_system):
        mock_file_system.read_prefix.side_effect = PermissionError("denied")
        result = make_sorter().sort_file(Path("/input/locked.3ds"))

        assert result.status == SortStatus.ERROR
        assert "denied" in result.error

    def test_existing_destination_is_not_overwritten(self, make_sorter, mock_file_system):
        mock_file_system.exists.return_value = True
        result = make_sorter().sort_file(Path("/input/mario.3ds"))

        assert result.status == SortStatus.ERROR
        assert "existante" in result.error
        mock_file_system.copy.assert_not_called()

    def test_failed_copy(self, make_sorter, mock_file_system):
        mock_file_system.copy.return_value = False
        result = make_sorter().sort_file(Path("/input/mario.3ds"))

        assert result.status == SortStatus.ERROR
        assert result.destinations == []

    def test_unusable_display_name(self, make_sorter):
        records = [CatalogRecord("0004000000054100", "***", Region.EUR)]
        result = make_sorter(records=records).sort_file(Path("/input/mario.3ds"))

        assert result.status == SortStatus.ERROR


# ====================
# Tests sort_directory
# ====================


class TestSortDirectory:
    """Tests du traitement d'un repertoire."""

    def test_processes_every_listed_file(self, make_sorter, mock_file_system):
        mock_file_system.exists.side_effect = lambda path: path == Path("/input")
        mock_file_system.list_files.return_value = iter(
            [Path("/input/a.3ds"), Path("/input/b.cia")]
        )
        results = list(make_sorter(dry_run=True).sort_directory(Path("/input")))

        assert [r.source.name for r in results] == ["a.3ds", "b.cia"]

    def test_error_does_not_stop_processing(self, make_sorter, mock_file_system, header_factory):
        mock_file_system.exists.side_effect = lambda path: path == Path("/input")
        mock_file_system.list_files.return_value = iter(
            [Path("/input/bad.cia"), Path("/input/good.3ds")]
        )
        mock_file_system.read_prefix.side_effect = [
            b"",
            header_factory(ContainerFormat.NCSD, "0004000000054100"),
        ]
        results = list(make_sorter().sort_directory(Path("/input")))

        assert [r.status for r in results] == [SortStatus.ERROR, SortStatus.COPIED]

    def test_missing_input_directory(self, make_sorter, mock_file_system):
        mock_file_system.exists.return_value = False
        with pytest.raises(FileNotFoundError):
            list(make_sorter().sort_directory(Path("/missing")))


class TestSortSummary:
    """Tests des compteurs."""

    def test_counts_each_status(self):
        summary = SortSummary()
        for status in (
            SortStatus.COPIED,
            SortStatus.COPIED,
            SortStatus.MATCHED,
            SortStatus.NO_MATCH,
            SortStatus.ERROR,
        ):
            summary.add(SortResult(source=Path("x"), status=status))

        assert summary.total == 5
        assert summary.copied == 2
        assert summary.matched == 1
        assert summary.no_match == 1
        assert summary.errors == 1
