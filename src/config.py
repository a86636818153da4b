"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CTRORG_,
et peut optionnellement être fournie via un fichier .env.

L'ordre de préférence des régions et les suffixes de sortie sont configurables,
ce qui permet de les substituer dans les tests ou selon les conventions de nommage.
"""

from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.core.value_objects import DEFAULT_REGION_PRIORITY, Region

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CTRORG_.
    Exemple : CTRORG_REGION_PRIORITY=USA,EUR,JPN

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CTRORG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Chemins (avec expansion ~)
    input_dir: Path = Field(default=Path("./input"))
    output_dir: Path = Field(default=Path("./output"))
    catalog_file: Path = Field(default=Path("./3dsreleases.xml"))

    # Résolution des régions
    region_priority: Annotated[list[Region], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_REGION_PRIORITY)
    )
    region_fallback: bool = Field(default=False)

    # Nommage des fichiers de sortie
    cartridge_suffix: str = Field(default=".3ds")
    package_suffix: str = Field(default=".standard.cia")

    # Traitement
    dry_run: bool = Field(default=False)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/ctrorg.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("input_dir", "output_dir", "catalog_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("region_priority", mode="before")
    @classmethod
    def parse_region_priority(cls, v: Any) -> list[Region]:
        """Accepte une liste ou une chaîne séparée par des virgules (EUR,USA,JPN)."""
        if isinstance(v, str):
            v = [part for part in v.split(",") if part.strip()]
        regions = [Region.parse(item) for item in v]
        if not regions:
            raise ValueError("region_priority ne peut pas être vide")
        return regions

    @field_validator("cartridge_suffix", "package_suffix")
    @classmethod
    def check_suffix(cls, v: str) -> str:
        """Un suffixe doit commencer par un point (ex: .3ds, .trim.cia)."""
        if not v.startswith("."):
            raise ValueError(f"Le suffixe doit commencer par un point: {v!r}")
        return v
