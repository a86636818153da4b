"""
Utilitaires partages pour les commandes CLI de CtrOrg.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- build_container : container initialise avec les surcharges des options CLI
- render_summary : tableau Rich du bilan d'un tri
"""

from contextlib import contextmanager
from typing import Any

from dependency_injector import providers
from loguru import logger as loguru_logger
from rich.console import Console
from rich.table import Table

from src.config import Settings
from src.container import Container
from src.services.sorter import SortSummary

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def build_container(**overrides: Any) -> Container:
    """
    Cree un container dont la configuration integre les options CLI.

    Les options a None (non fournies) sont ignorees et laissent la valeur
    issue de l'environnement. Les surcharges repassent par les validateurs
    de Settings (expansion de ~, controle des suffixes).

    Usage:
        container = build_container(output_dir=Path("out"), dry_run=None)
        sorter = container.sorter_service()
    """
    container = Container()
    updates = {key: value for key, value in overrides.items() if value is not None}
    if updates:
        current = container.config()
        settings = Settings.model_validate({**current.model_dump(), **updates})
        container.config.override(providers.Object(settings))
    return container


def render_summary(summary: SortSummary, dry_run: bool = False) -> Table:
    """Construit le tableau Rich du bilan d'un tri."""
    table = Table(title="Bilan du tri", show_header=True, header_style="bold")
    table.add_column("Statut")
    table.add_column("Fichiers", justify="right")

    if dry_run:
        table.add_row("[cyan]Identifies (dry-run)[/cyan]", str(summary.matched))
    else:
        table.add_row("[green]Copies[/green]", str(summary.copied))
    table.add_row("[yellow]Sans correspondance[/yellow]", str(summary.no_match))
    table.add_row("[red]Erreurs[/red]", str(summary.errors))
    table.add_row("[bold]Total[/bold]", f"[bold]{summary.total}[/bold]")
    return table
