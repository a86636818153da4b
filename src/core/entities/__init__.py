"""
Business entities representing core domain concepts.

Exports:
- CatalogRecord: One released variant of a title, from the catalog
"""

from src.core.entities.catalog import CatalogRecord

__all__ = [
    "CatalogRecord",
]
