"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- Region : Region de release, ordonnee par rang
- ContainerFormat : Format de conteneur (NCCH, NCSD)
- HeaderInfo : Title ID et format extraits d'un en-tete
- format_title_id : Conversion des octets bruts en title ID canonique
"""

from src.core.value_objects.header import (
    ContainerFormat,
    HeaderInfo,
    format_title_id,
    normalize_title_id,
)
from src.core.value_objects.region import DEFAULT_REGION_PRIORITY, Region

__all__ = [
    "ContainerFormat",
    "HeaderInfo",
    "format_title_id",
    "normalize_title_id",
    "Region",
    "DEFAULT_REGION_PRIORITY",
]
