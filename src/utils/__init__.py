"""
Utilitaires et constantes pour CtrOrg.

Ce module contient les constantes partagees.
"""

from src.utils.constants import (
    FORBIDDEN_FILENAME_CHARS,
    GAME_EXTENSIONS,
    MAGIC_SIZE,
    NCCH_MAGIC_OFFSET,
    NCCH_TITLE_ID_OFFSET,
    NCSD_MAGIC_OFFSET,
    NCSD_TITLE_ID_OFFSET,
)

__all__ = [
    "GAME_EXTENSIONS",
    "FORBIDDEN_FILENAME_CHARS",
    "MAGIC_SIZE",
    "NCSD_MAGIC_OFFSET",
    "NCSD_TITLE_ID_OFFSET",
    "NCCH_MAGIC_OFFSET",
    "NCCH_TITLE_ID_OFFSET",
]
