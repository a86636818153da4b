"""
Service de resolution des variantes regionales.

Quand plusieurs enregistrements du catalogue partagent un title ID, un seul
est retenu : celui dont la region apparait le plus tot dans l'ordre de
preference configure.

Regles:
- Un candidat unique est retenu quelle que soit sa region
- Au plus un gagnant par title ID distinct
- Les gagnants sont emis dans l'ordre de la liste de preference
- Un title ID sans aucune region preferee n'a pas de gagnant, sauf si le
  repli sur n'importe quelle region est active
"""

from typing import Iterable, Sequence

from loguru import logger

from src.core.entities import CatalogRecord
from src.core.value_objects import DEFAULT_REGION_PRIORITY, Region


class RegionResolver:
    """
    Selection du meilleur enregistrement par ordre de preference regional.

    Utilisation:
        resolver = RegionResolver([Region.EUR, Region.USA, Region.JPN])
        winners = resolver.resolve(index.lookup(title_id))
    """

    def __init__(
        self,
        priority: Iterable[Region] = DEFAULT_REGION_PRIORITY,
        fallback_to_any_region: bool = False,
    ) -> None:
        """
        Initialise le resolveur.

        Args:
            priority: Regions par ordre de preference decroissante
            fallback_to_any_region: Si True, un title ID sans region preferee
                retient sa premiere variante (par rang de region) au lieu
                d'etre ignore
        """
        self._priority: tuple[Region, ...] = tuple(priority)
        self._fallback = fallback_to_any_region

    @property
    def priority(self) -> tuple[Region, ...]:
        """Ordre de preference utilise."""
        return self._priority

    def resolve(self, candidates: Sequence[CatalogRecord]) -> list[CatalogRecord]:
        """
        Selectionne le ou les gagnants parmi les candidats.

        Args:
            candidates: Enregistrements partageant (normalement) un title ID

        Returns:
            Gagnants, au plus un par title ID, dans l'ordre de preference
        """
        if len(candidates) == 1:
            return [candidates[0]]

        # Tri stable par rang de region
        ordered = sorted(candidates, key=lambda record: record.region.rank)

        winners: list[CatalogRecord] = []
        satisfied: set[str] = set()
        for region in self._priority:
            for record in ordered:
                if record.region is region and record.title_id not in satisfied:
                    winners.append(record)
                    satisfied.add(record.title_id)

        if self._fallback:
            for record in ordered:
                if record.title_id not in satisfied:
                    logger.debug(
                        "Aucune region preferee, repli sur la premiere variante",
                        title_id=record.title_id,
                        region=record.region.value,
                    )
                    winners.append(record)
                    satisfied.add(record.title_id)

        return winners
