"""
Index en memoire du catalogue de releases.

Construit une fois au demarrage a partir des enregistrements charges,
puis interroge par title ID pour chaque fichier traite.
"""

from collections import defaultdict
from typing import Iterable, Iterator

from src.core.entities import CatalogRecord
from src.core.ports.catalog import ICatalogSource
from src.core.value_objects import normalize_title_id


class CatalogIndex:
    """
    Index title ID -> enregistrements du catalogue.

    Plusieurs enregistrements partagent un title ID lorsqu'un titre est
    sorti dans plusieurs regions. L'index n'est jamais modifie apres
    sa construction.
    """

    def __init__(self, records: Iterable[CatalogRecord]) -> None:
        """
        Construit l'index.

        Args:
            records: Enregistrements issus de la source de catalogue
        """
        index: defaultdict[str, list[CatalogRecord]] = defaultdict(list)
        count = 0
        for record in records:
            index[normalize_title_id(record.title_id)].append(record)
            count += 1
        self._index: dict[str, list[CatalogRecord]] = dict(index)
        self._count = count

    def lookup(self, title_id: str) -> list[CatalogRecord]:
        """
        Retourne tous les enregistrements ayant ce title ID.

        Args:
            title_id: Title ID recherche (la casse et le prefixe 0x sont ignores)

        Returns:
            Nouvelle liste des enregistrements (vide si inconnu)
        """
        return list(self._index.get(normalize_title_id(title_id), ()))

    def title_ids(self) -> Iterator[str]:
        """Itere sur les title IDs distincts de l'index."""
        return iter(self._index)

    def __contains__(self, title_id: object) -> bool:
        if not isinstance(title_id, str):
            return False
        return normalize_title_id(title_id) in self._index

    def __len__(self) -> int:
        return self._count


def load_catalog_index(source: ICatalogSource) -> CatalogIndex:
    """
    Charge une source de catalogue et construit son index.

    Raises:
        CatalogLoadError: Si la source ne peut pas etre chargee
    """
    return CatalogIndex(source.load())
