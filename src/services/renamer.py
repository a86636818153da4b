"""
Service de nommage des fichiers de sortie.

Ce module fournit le nettoyage des noms d'affichage du catalogue et la
generation du nom de destination d'un dump.

Format : NomNettoye + suffixe du format decode
- NCSD (image de carte) : "Nom.3ds"
- NCCH (contenu CIA) : "Nom.standard.cia" (ou ".trim.cia" selon la configuration)
"""

import unicodedata

from pathvalidate import sanitize_filename

from src.core.entities import CatalogRecord
from src.core.value_objects import ContainerFormat
from src.utils.constants import FORBIDDEN_FILENAME_CHARS


# Longueur maximale du nom de fichier (hors suffixe)
MAX_FILENAME_LENGTH = 200


def sanitize_for_filesystem(text: str) -> str:
    """
    Nettoie une chaîne pour l'utiliser comme nom de fichier.

    Transformations appliquées :
    - Normalisation Unicode NFKC
    - Suppression des caractères \\ / : * " < > |
    - Nettoyage pathvalidate (plateforme universelle)
    - Suppression des espaces en début et fin
    - Troncature à 200 caractères maximum

    Args:
        text: Texte à nettoyer.

    Returns:
        Texte valide pour un nom de fichier.
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKC", text)

    for char in FORBIDDEN_FILENAME_CHARS:
        text = text.replace(char, "")

    text = sanitize_filename(text, platform="universal", replacement_text="")
    text = text.strip()

    if len(text) > MAX_FILENAME_LENGTH:
        text = text[:MAX_FILENAME_LENGTH].rstrip()

    return text


class OutputNaming:
    """
    Generation des noms de fichiers de sortie.

    Le suffixe depend du format decode depuis l'en-tete, pas de
    l'extension du fichier source.
    """

    def __init__(
        self,
        cartridge_suffix: str = ".3ds",
        package_suffix: str = ".standard.cia",
    ) -> None:
        """
        Args:
            cartridge_suffix: Suffixe des images de carte (NCSD)
            package_suffix: Suffixe des contenus installables (NCCH)
        """
        self._suffixes = {
            ContainerFormat.NCSD: cartridge_suffix,
            ContainerFormat.NCCH: package_suffix,
        }

    def suffix_for(self, container_format: ContainerFormat) -> str:
        """Retourne le suffixe associe a un format."""
        return self._suffixes[container_format]

    def build_filename(
        self, record: CatalogRecord, container_format: ContainerFormat
    ) -> str:
        """
        Construit le nom de destination d'un dump.

        Args:
            record: Enregistrement gagnant du catalogue
            container_format: Format decode du fichier source

        Returns:
            Nom de fichier (ex: "Super Mario 3D Land.3ds")

        Raises:
            ValueError: Si le nom nettoye est vide
        """
        name = sanitize_for_filesystem(record.name)
        if not name:
            raise ValueError(
                f"Nom d'affichage inutilisable pour {record.title_id}: {record.name!r}"
            )
        return f"{name}{self.suffix_for(container_format)}"
