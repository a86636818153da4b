"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.catalog_commands import lookup
from src.adapters.cli.commands.sort_commands import identify, sort

__all__ = [
    # tri
    "sort",
    "identify",
    # catalogue
    "lookup",
]
