"""
Source de catalogue JSON.

Structure attendue: un tableau d'objets, ou un objet avec une cle
"releases" contenant ce tableau.

    [
      {"titleid": "0004000000054100", "name": "Super Mario 3D Land", "region": "EUR"},
      ...
    ]

Le title ID est accepte sous les cles "titleid", "title_id" ou "titleId".
"""

import json
from typing import Iterator

from src.adapters.catalog.base import CatalogFileSource
from src.core.exceptions import CatalogLoadError

_TITLE_ID_KEYS = ("titleid", "title_id", "titleId")


class JsonCatalogSource(CatalogFileSource):
    """Lecture d'un catalogue JSON (document charge en une fois)."""

    def _iter_raw(self) -> Iterator[dict]:
        with open(self.path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise CatalogLoadError(f"JSON malforme: {e}", source=str(self.path)) from e

        if isinstance(data, dict):
            data = data.get("releases")
        if not isinstance(data, list):
            raise CatalogLoadError(
                "Le catalogue JSON doit etre un tableau d'enregistrements",
                source=str(self.path),
            )

        for entry in data:
            if not isinstance(entry, dict):
                yield {}
                continue
            title_id = next(
                (str(entry[key]) for key in _TITLE_ID_KEYS if entry.get(key)), ""
            )
            yield {
                "title_id": title_id,
                "name": str(entry.get("name") or ""),
                "region": str(entry.get("region") or ""),
            }
