"""
Source de catalogue XML au format 3dsreleases.xml.

Structure attendue:
    <releases>
      <release>
        <name>Super Mario 3D Land</name>
        <region>EUR</region>
        <titleid>0004000000054100</titleid>
        ...
      </release>
    </releases>

Les autres elements d'une release (publisher, serial, crc...) sont ignores.
"""

import xml.etree.ElementTree as ET
from typing import Iterator

from src.adapters.catalog.base import CatalogFileSource
from src.core.exceptions import CatalogLoadError


class XmlCatalogSource(CatalogFileSource):
    """
    Lecture en streaming d'une liste de releases XML.

    Utilise iterparse et libere chaque element <release> apres lecture
    pour limiter la memoire sur les gros catalogues.
    """

    release_tag = "release"

    def _iter_raw(self) -> Iterator[dict]:
        try:
            for _, element in ET.iterparse(self.path, events=("end",)):
                if _local_name(element.tag) != self.release_tag:
                    continue
                yield {
                    "name": _child_text(element, "name"),
                    "region": _child_text(element, "region"),
                    "title_id": _child_text(element, "titleid"),
                }
                element.clear()
        except ET.ParseError as e:
            raise CatalogLoadError(f"XML malforme: {e}", source=str(self.path)) from e


def _local_name(tag: str) -> str:
    """Retire l'eventuel espace de noms ({uri}tag -> tag)."""
    return tag.rsplit("}", 1)[-1]


def _child_text(element: ET.Element, name: str) -> str:
    """Texte du premier enfant portant ce nom local, ou chaine vide."""
    for child in element:
        if _local_name(child.tag) == name:
            return (child.text or "").strip()
    return ""
