"""
Objets valeur pour l'en-tete binaire des fichiers 3DS.

- ContainerFormat : type de conteneur detecte par son tag magique
- HeaderInfo : resultat du decodage (title ID + format)
- format_title_id : conversion des 8 octets bruts en title ID canonique
"""

from dataclasses import dataclass
from enum import Enum

# Longueur du champ title ID en octets
TITLE_ID_SIZE = 8


class ContainerFormat(Enum):
    """Format de conteneur d'un dump 3DS.

    Valeurs:
        NCCH: Contenu installable (CIA), tag "NCCH" a 0x3A40
        NCSD: Image de carte (.3ds), tag "NCSD" a 0x100
    """

    NCCH = "NCCH"
    NCSD = "NCSD"

    @property
    def magic(self) -> bytes:
        """Tag magique ASCII du format."""
        return self.value.encode("ascii")


@dataclass(frozen=True)
class HeaderInfo:
    """
    Informations extraites de l'en-tete d'un fichier.

    Attributs:
        title_id: Title ID canonique (16 caracteres hexadecimaux majuscules)
        container_format: Format de conteneur detecte
    """

    title_id: str
    container_format: ContainerFormat


def format_title_id(raw: bytes) -> str:
    """
    Convertit le champ title ID brut en chaine hexadecimale canonique.

    Le champ est stocke en little-endian : les octets sont inverses puis
    rendus en deux chiffres hexadecimaux majuscules chacun.

    Args:
        raw: Les 8 octets du champ title ID

    Returns:
        Title ID sur 16 caracteres (ex: "0004000000030800")

    Raises:
        ValueError: Si le champ ne fait pas 8 octets
    """
    if len(raw) != TITLE_ID_SIZE:
        raise ValueError(
            f"Le title ID doit faire {TITLE_ID_SIZE} octets, recu {len(raw)}"
        )
    return bytes(reversed(raw)).hex().upper()


def normalize_title_id(value: str) -> str:
    """Normalise un title ID texte (espaces, prefixe 0x, casse)."""
    value = (value or "").strip()
    if value[:2].lower() == "0x":
        value = value[2:]
    return value.upper()
