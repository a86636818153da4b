"""
Interface port pour les sources de catalogue.

Un catalogue est une liste d'enregistrements (title ID, nom, region)
charges une seule fois au demarrage depuis une source externe.
"""

from abc import ABC, abstractmethod

from src.core.entities import CatalogRecord


class ICatalogSource(ABC):
    """
    Interface pour le chargement d'un catalogue de releases.

    Les implementations lisent un document serialise (XML, JSON) et le
    convertissent en CatalogRecord.
    """

    @abstractmethod
    def load(self) -> list[CatalogRecord]:
        """
        Charge tous les enregistrements du catalogue.

        Returns:
            Liste des enregistrements, dans l'ordre du document

        Raises:
            CatalogLoadError: Si la source est absente, illisible ou malformee
        """
        ...
