"""
Tests unitaires pour le nommage des fichiers de sortie.
"""

import pytest

from src.core.entities import CatalogRecord
from src.core.value_objects import ContainerFormat, Region
from src.services.renamer import MAX_FILENAME_LENGTH, OutputNaming, sanitize_for_filesystem


# ====================
# Tests sanitize_for_filesystem
# ====================


class TestSanitizeForFilesystem:
    """Tests pour le nettoyage des noms d'affichage."""

    def test_removes_forbidden_characters(self):
        assert sanitize_for_filesystem('A:B/C\\D*E"F<G>H|I') == "ABCDEFGHI"

    def test_keeps_regular_title(self):
        assert sanitize_for_filesystem("Super Mario 3D Land") == "Super Mario 3D Land"

    def test_colon_in_title(self):
        """The Legend of Zelda: ... -> deux-points retire."""
        assert (
            sanitize_for_filesystem("The Legend of Zelda: Ocarina of Time 3D")
            == "The Legend of Zelda Ocarina of Time 3D"
        )

    def test_strips_surrounding_spaces(self):
        assert sanitize_for_filesystem("  Pilotwings Resort  ") == "Pilotwings Resort"

    def test_empty_string(self):
        assert sanitize_for_filesystem("") == ""

    def test_truncates_long_names(self):
        assert len(sanitize_for_filesystem("A" * 300)) == MAX_FILENAME_LENGTH

    def test_nfkc_normalization(self):
        """Les formes de compatibilite Unicode sont normalisees."""
        assert sanitize_for_filesystem("Pokémon Ｘ") == "Pokémon X"


# ====================
# Tests OutputNaming
# ====================


@pytest.fixture
def record() -> CatalogRecord:
    return CatalogRecord("0004000000054100", "Super Mario 3D Land", Region.EUR)


class TestOutputNaming:
    """Tests pour la generation des noms de destination."""

    def test_ncsd_uses_cartridge_suffix(self, record):
        naming = OutputNaming()
        assert naming.build_filename(record, ContainerFormat.NCSD) == "Super Mario 3D Land.3ds"

    def test_ncch_uses_package_suffix(self, record):
        naming = OutputNaming()
        assert (
            naming.build_filename(record, ContainerFormat.NCCH)
            == "Super Mario 3D Land.standard.cia"
        )

    def test_package_suffix_is_configurable(self, record):
        naming = OutputNaming(package_suffix=".trim.cia")
        assert naming.suffix_for(ContainerFormat.NCCH) == ".trim.cia"
        assert naming.build_filename(record, ContainerFormat.NCCH).endswith(".trim.cia")

    def test_name_is_sanitized(self):
        naming = OutputNaming()
        record = CatalogRecord("0004000000033500", "Zelda: OoT 3D", Region.USA)
        assert naming.build_filename(record, ContainerFormat.NCSD) == "Zelda OoT 3D.3ds"

    def test_unusable_name_raises(self):
        naming = OutputNaming()
        record = CatalogRecord("0004000000033500", '<>:"', Region.USA)
        with pytest.raises(ValueError):
            naming.build_filename(record, ContainerFormat.NCSD)
