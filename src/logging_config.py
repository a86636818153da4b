"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : une ligne lisible par événement, avec son contexte (fichier, title ID...)
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'historique des tris
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level> <dim>{extra}</dim>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/ctrorg.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver

    Le contexte passé en kwargs aux appels logger (file=, title_id=...) apparaît
    en fin de ligne sur la console et comme champs JSON dans le fichier.
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level.upper(), format=CONSOLE_FORMAT, colorize=True)

    # Fichier JSON : capture tout, y compris le décodage des en-têtes (DEBUG)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
    )

    logger.debug("Logging configuré", log_file=str(log_file), level=log_level)
