"""
Commandes CLI de consultation du catalogue (lookup).
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.table import Table

from src.adapters.cli.helpers import build_container, console
from src.core.exceptions import CatalogLoadError


def lookup(
    title_id: Annotated[str, typer.Argument(help="Title ID a rechercher")],
    catalog_file: Annotated[
        Optional[Path],
        typer.Option("--catalog", "-c", help="Catalogue de releases (XML ou JSON)"),
    ] = None,
) -> None:
    """Affiche les variantes d'un title ID et la variante retenue."""
    container = build_container(catalog_file=catalog_file)

    try:
        index = container.catalog_index()
    except CatalogLoadError as e:
        console.print(f"[red]Erreur de chargement du catalogue: {e}[/red]")
        raise typer.Exit(1)

    candidates = index.lookup(title_id)
    if not candidates:
        console.print(f"[yellow]Aucune release pour {title_id}[/yellow]")
        raise typer.Exit(0)

    winners = container.region_resolver().resolve(candidates)

    table = Table(title=f"Releases {title_id.upper()}", show_header=True)
    table.add_column("Nom")
    table.add_column("Region")
    table.add_column("Retenue", justify="center")
    for record in candidates:
        mark = "[green]x[/green]" if record in winners else ""
        table.add_row(record.name, record.region.value, mark)
    console.print(table)

    if not winners:
        console.print("[yellow]Aucune region preferee disponible[/yellow]")
