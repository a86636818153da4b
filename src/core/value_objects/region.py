"""
Objet valeur pour les regions de release.

L'ordre de declaration des membres definit un rang total utilise pour
trier les variantes regionales de maniere deterministe.
"""

from enum import Enum

from src.core.exceptions import UnknownRegionError


class Region(Enum):
    """Region d'une release 3DS.

    Valeurs:
        EUR: Europe
        USA: Amerique du Nord
        JPN: Japon
        TWN: Taiwan
        ITA: Italie
        SPA: Espagne
        FRA: France
        GER: Allemagne
        KOR: Coree
        CHN: Chine
        UKV: Royaume-Uni
        NLD: Pays-Bas
        WLD: Monde (region free)
        RUS: Russie
    """

    EUR = "EUR"
    USA = "USA"
    JPN = "JPN"
    TWN = "TWN"
    ITA = "ITA"
    SPA = "SPA"
    FRA = "FRA"
    GER = "GER"
    KOR = "KOR"
    CHN = "CHN"
    UKV = "UKV"
    NLD = "NLD"
    WLD = "WLD"
    RUS = "RUS"

    @property
    def rank(self) -> int:
        """Position de la region dans l'ordre de declaration."""
        return _RANKS[self]

    def __lt__(self, other: "Region") -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return self.rank < other.rank

    @classmethod
    def parse(cls, value: str) -> "Region":
        """
        Convertit un code texte en Region.

        Args:
            value: Code region (ex: "EUR", " usa ")

        Returns:
            Le membre Region correspondant

        Raises:
            UnknownRegionError: Si le code n'appartient pas a l'ensemble connu
        """
        if isinstance(value, Region):
            return value
        key = (value or "").strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise UnknownRegionError(value) from None


_RANKS = {region: index for index, region in enumerate(Region)}

# Ordre de preference par defaut (identique a l'ordre de declaration)
DEFAULT_REGION_PRIORITY: tuple[Region, ...] = tuple(Region)
