"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem pour les operations fichiers reelles :
lecture de l'en-tete, enumeration des dumps et copie.
"""

import os
import shutil
import uuid
from pathlib import Path
from typing import Iterator

from loguru import logger

from src.core.ports.file_system import IFileSystem


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.

    Fournit les operations basiques sur les fichiers (exists, copy)
    ainsi que la lecture d'en-tete et l'enumeration des dumps.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        return path.exists()

    def read_prefix(self, path: Path, size: int) -> bytes:
        """
        Lit au plus size octets depuis le debut du fichier.

        Un fichier plus court retourne moins d'octets : c'est au decodeur
        de signaler l'en-tete tronque.
        """
        with open(path, "rb") as f:
            return f.read(size)

    def copy(self, source: Path, destination: Path) -> bool:
        """
        Copie un fichier de la source vers la destination.

        Cree les repertoires parents si necessaire. La copie passe par un
        fichier temporaire voisin renomme par os.replace : une copie
        interrompue (disque plein...) ne laisse jamais de fichier tronque
        a la destination.

        Returns:
            True si la copie a reussi, False sinon (la cause est loggee).
        """
        temp = destination.with_name(f".tmp_{uuid.uuid4().hex}_{destination.name}")
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            try:
                shutil.copy2(source, temp)
                os.replace(temp, destination)
            except Exception:
                # Nettoyer le fichier temporaire en cas d'erreur
                if temp.exists():
                    temp.unlink()
                raise
            return True
        except (OSError, shutil.Error) as e:
            logger.warning(
                "Echec de la copie", source=str(source), destination=str(destination), error=str(e)
            )
            return False

    def list_files(self, directory: Path, extensions: frozenset[str]) -> Iterator[Path]:
        """
        Liste les dumps d'un repertoire (non recursif).

        Filtre:
        - Par extension (insensible a la casse)
        - Exclut les repertoires
        - Exclut les fichiers caches

        Args:
            directory: Repertoire a parcourir
            extensions: Extensions acceptees (ex: {".3ds", ".cia"})

        Yields:
            Chemins des fichiers retenus, tries par nom
        """
        if not directory.is_dir():
            return

        for path in sorted(directory.iterdir(), key=lambda p: p.name):
            # Ignorer les repertoires
            if not path.is_file():
                continue

            # Ignorer les fichiers caches
            if path.name.startswith("."):
                continue

            # Verifier l'extension
            if path.suffix.lower() not in extensions:
                continue

            yield path
