"""
Fixtures pytest partagees pour les tests CtrOrg.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock de l'interface IFileSystem
- Constructeur d'en-tetes 3DS en memoire
- Catalogue d'exemple
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest

from src.config import Settings
from src.core.entities import CatalogRecord
from src.core.ports.file_system import IFileSystem
from src.core.value_objects import ContainerFormat, Region

HEADER_SIZE = 0x3A50

# Super Mario 3D Land (EUR/USA/JPN partagent le meme title ID ici)
MARIO_TITLE_ID = "0004000000054100"
ZELDA_TITLE_ID = "0004000000033500"


def build_header(
    container_format: Optional[ContainerFormat],
    title_id: str,
    size: int = HEADER_SIZE,
    fill: int = 0xAA,
) -> bytes:
    """
    Construit un en-tete 3DS en memoire.

    Le buffer est rempli d'un octet de bruit, puis le tag magique et le
    title ID (little-endian) sont places aux offsets du format.
    """
    data = bytearray([fill]) * max(size, HEADER_SIZE)
    raw_id = bytes.fromhex(title_id)[::-1]
    if container_format == ContainerFormat.NCSD:
        data[0x100:0x104] = b"NCSD"
        data[0x108:0x110] = raw_id
    elif container_format == ContainerFormat.NCCH:
        data[0x3A40:0x3A44] = b"NCCH"
        data[0x3A48:0x3A50] = raw_id
    return bytes(data[:size])


@pytest.fixture
def header_factory() -> Callable[..., bytes]:
    """Retourne le constructeur d'en-tetes build_header."""
    return build_header


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Le mock implemente toutes les methodes de IFileSystem.
    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.exists.return_value = False
    mock.copy.return_value = True
    mock.read_prefix.return_value = build_header(ContainerFormat.NCSD, MARIO_TITLE_ID)
    mock.list_files.return_value = iter([])
    return mock


@pytest.fixture
def catalog_records() -> list[CatalogRecord]:
    """Catalogue d'exemple avec plusieurs variantes regionales."""
    return [
        CatalogRecord(MARIO_TITLE_ID, "Super Mario 3D Land (JPN)", Region.JPN),
        CatalogRecord(MARIO_TITLE_ID, "Super Mario 3D Land (USA)", Region.USA),
        CatalogRecord(MARIO_TITLE_ID, "Super Mario 3D Land (EUR)", Region.EUR),
        CatalogRecord(ZELDA_TITLE_ID, "The Legend of Zelda: Ocarina of Time 3D", Region.USA),
    ]


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour creer une structure de repertoires
    isolee pour chaque test.
    """
    input_dir = tmp_path / "input"
    output_dir = tmp_path / "output"
    input_dir.mkdir(parents=True)

    return Settings(
        _env_file=None,
        input_dir=input_dir,
        output_dir=output_dir,
        catalog_file=tmp_path / "3dsreleases.xml",
        log_file=tmp_path / "test.log",
    )
