"""
Point d'entrée CLI de CtrOrg.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import identify, lookup, sort
from .config import Settings
from .container import Container
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="ctrorg",
    help="Identification et tri des dumps Nintendo 3DS",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Logs de debug sur la console"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """CtrOrg - Tri des dumps de cartouches 3DS."""
    if not (verbose or quiet):
        return
    settings = get_config()
    configure_logging(
        log_level="ERROR" if quiet else "DEBUG",
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(sort)
app.command()(identify)
app.command()(lookup)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration CtrOrg")
    typer.echo(f"Entrée : {config.input_dir}")
    typer.echo(f"Sortie : {config.output_dir}")
    typer.echo(f"Catalogue : {config.catalog_file}")
    typer.echo(f"Priorité des régions : {', '.join(r.value for r in config.region_priority)}")
    typer.echo(f"Repli sur toute région : {'activé' if config.region_fallback else 'désactivé'}")
    typer.echo(f"Suffixes : {config.cartridge_suffix} (NCSD), {config.package_suffix} (NCCH)")
    typer.echo(f"Dry-run : {'oui' if config.dry_run else 'non'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CtrOrg v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de CtrOrg", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
