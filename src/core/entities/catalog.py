"""
Entité enregistrement de catalogue.

Un enregistrement décrit une variante publiée d'un titre : plusieurs
enregistrements partagent le même title ID quand un jeu est sorti
dans plusieurs régions.
"""

from dataclasses import dataclass

from src.core.value_objects import Region


@dataclass(frozen=True)
class CatalogRecord:
    """
    Variante régionale d'un titre, issue du catalogue de releases.

    Attributs :
        title_id : Title ID canonique (clé de jointure avec HeaderInfo)
        name : Nom d'affichage de la release
        region : Région de la release
    """

    title_id: str
    name: str
    region: Region
