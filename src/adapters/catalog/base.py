"""
Base commune des sources de catalogue sur fichier.

Les sous-classes produisent des enregistrements bruts (dictionnaires) ;
la base verifie le fichier, convertit chaque entree en CatalogRecord et
ignore les entrees invalides en les journalisant.
"""

import re
from abc import abstractmethod
from pathlib import Path
from typing import Iterator

from loguru import logger

from src.core.entities import CatalogRecord
from src.core.exceptions import CatalogLoadError, UnknownRegionError
from src.core.ports.catalog import ICatalogSource
from src.core.value_objects import Region, normalize_title_id

_TITLE_ID_RE = re.compile(r"^[0-9A-F]{16}$")


def build_record(title_id: str, name: str, region: str) -> CatalogRecord:
    """
    Construit un CatalogRecord a partir de champs texte.

    Args:
        title_id: Title ID (16 chiffres hexadecimaux, prefixe 0x tolere)
        name: Nom d'affichage
        region: Code region (EUR, USA, ...)

    Returns:
        CatalogRecord normalise

    Raises:
        ValueError: Title ID invalide ou nom vide
        UnknownRegionError: Region inconnue
    """
    normalized = normalize_title_id(title_id)
    if not _TITLE_ID_RE.match(normalized):
        raise ValueError(f"Title ID invalide: {title_id!r}")
    name = (name or "").strip()
    if not name:
        raise ValueError(f"Nom vide pour {normalized}")
    return CatalogRecord(title_id=normalized, name=name, region=Region.parse(region))


class CatalogFileSource(ICatalogSource):
    """
    Source de catalogue lue depuis un fichier local.

    Attributs:
        skipped: Nombre d'entrees ignorees lors du dernier chargement
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self.skipped = 0

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[CatalogRecord]:
        """
        Charge le catalogue.

        Raises:
            CatalogLoadError: Fichier absent, illisible ou malforme
        """
        if not self._path.is_file():
            raise CatalogLoadError("Catalogue introuvable", source=str(self._path))

        records: list[CatalogRecord] = []
        self.skipped = 0
        try:
            for position, raw in enumerate(self._iter_raw(), start=1):
                try:
                    records.append(
                        build_record(
                            raw.get("title_id", ""),
                            raw.get("name", ""),
                            raw.get("region", ""),
                        )
                    )
                except (ValueError, UnknownRegionError) as e:
                    self.skipped += 1
                    logger.warning("Entree de catalogue ignoree", position=position, error=str(e))
        except OSError as e:
            raise CatalogLoadError(f"Lecture impossible: {e}", source=str(self._path)) from e

        logger.info(
            "Catalogue charge",
            source=str(self._path),
            records=len(records),
            skipped=self.skipped,
        )
        return records

    @abstractmethod
    def _iter_raw(self) -> Iterator[dict]:
        """
        Produit les entrees brutes du document.

        Chaque entree est un dictionnaire avec les cles title_id, name, region.

        Raises:
            CatalogLoadError: Document malforme
            OSError: Fichier illisible
        """
        ...
