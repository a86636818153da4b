"""
Adaptateurs de chargement du catalogue de releases.

Sources supportees:
- XmlCatalogSource : liste XML au format 3dsreleases.xml
- JsonCatalogSource : tableau JSON d'enregistrements

create_catalog_source choisit l'adaptateur selon l'extension du fichier.
"""

from pathlib import Path

from src.adapters.catalog.base import CatalogFileSource, build_record
from src.adapters.catalog.json_source import JsonCatalogSource
from src.adapters.catalog.xml_source import XmlCatalogSource


def create_catalog_source(path: Path) -> CatalogFileSource:
    """
    Retourne la source adaptee a l'extension du fichier catalogue.

    Les fichiers .json sont lus par JsonCatalogSource, tous les autres
    par XmlCatalogSource.
    """
    path = Path(path)
    if path.suffix.lower() == ".json":
        return JsonCatalogSource(path)
    return XmlCatalogSource(path)


__all__ = [
    "CatalogFileSource",
    "JsonCatalogSource",
    "XmlCatalogSource",
    "build_record",
    "create_catalog_source",
]
