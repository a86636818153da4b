"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports système de fichiers : Contrats pour les opérations fichiers
- IFileSystem : Lecture d'en-tête, énumération et copie

Ports catalogue : Contrats pour le chargement des métadonnées
- ICatalogSource : Source d'enregistrements de catalogue
"""

from src.core.ports.catalog import ICatalogSource
from src.core.ports.file_system import IFileSystem

__all__ = [
    # Système de fichiers
    "IFileSystem",
    # Catalogue
    "ICatalogSource",
]
