"""
Exceptions du domaine CtrOrg.

Hierarchie :
- CtrOrgError : base de toutes les erreurs applicatives
  - DecodeError : en-tete illisible (fichier ignore, traitement continue)
    - TruncatedHeaderError : fichier plus court que la zone d'en-tete
    - UnrecognizedFormatError : aucun tag magique reconnu
  - UnknownRegionError : code region hors de l'ensemble connu
  - CatalogLoadError : catalogue absent ou malforme (fatal)
  - CopyError : echec de la copie vers le repertoire de sortie
"""

from typing import Optional


class CtrOrgError(Exception):
    """Erreur de base de l'application."""


class DecodeError(CtrOrgError):
    """L'en-tete d'un fichier n'a pas pu etre decode."""


class TruncatedHeaderError(DecodeError):
    """
    Le buffer est plus court que la zone d'en-tete requise.

    Attributes:
        expected: Taille minimale requise en octets
        actual: Taille effectivement disponible
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"En-tete tronque: {actual} octets lus, {expected} requis"
        )


class UnrecognizedFormatError(DecodeError):
    """Aucun des tags magiques connus n'a ete trouve."""

    def __init__(self, message: str = "Format de conteneur non reconnu") -> None:
        super().__init__(message)


class UnknownRegionError(CtrOrgError, ValueError):
    """Code region inconnu."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Region inconnue: {value!r}")


class CatalogLoadError(CtrOrgError):
    """
    Le catalogue n'a pas pu etre charge.

    Erreur fatale : sans catalogue aucun fichier ne peut etre identifie.
    """

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        self.source = source
        if source:
            message = f"{message} ({source})"
        super().__init__(message)


class CopyError(CtrOrgError):
    """
    La copie d'un fichier vers sa destination a echoue.

    Attributes:
        destination: Chemin cible de la copie
    """

    def __init__(self, message: str, destination: Optional[str] = None) -> None:
        self.destination = destination
        super().__init__(message)
