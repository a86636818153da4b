"""
Interfaces ports pour le système de fichiers.

Interfaces abstraites (ports) définissant les contrats pour les opérations fichiers.
Les implémentations (adaptateurs) fourniront l'accès concret au système de fichiers.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator


class IFileSystem(ABC):
    """
    Interface pour les opérations de base sur les fichiers.

    Définit les opérations nécessaires au tri des dumps : vérification
    d'existence, lecture de l'en-tête, énumération et copie de fichiers.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Vérifie si un chemin existe."""
        ...

    @abstractmethod
    def read_prefix(self, path: Path, size: int) -> bytes:
        """
        Lit les premiers octets d'un fichier.

        Args :
            path : Chemin vers le fichier
            size : Nombre maximal d'octets à lire

        Retourne :
            Les octets lus (peut être plus court que size si le fichier l'est)

        Lève :
            OSError : Si le fichier ne peut pas être lu
        """
        ...

    @abstractmethod
    def copy(self, source: Path, destination: Path) -> bool:
        """
        Copie un fichier de la source vers la destination.

        Crée les répertoires parents si nécessaire.

        Args :
            source : Chemin du fichier source
            destination : Chemin du fichier cible

        Retourne :
            True si réussi, False sinon
        """
        ...

    @abstractmethod
    def list_files(self, directory: Path, extensions: frozenset[str]) -> Iterator[Path]:
        """
        Liste les fichiers d'un répertoire ayant une des extensions données.

        Args :
            directory : Répertoire à parcourir (non récursif)
            extensions : Extensions acceptées, en minuscules avec le point

        Retourne :
            Itérateur sur les chemins, triés par nom
        """
        ...
