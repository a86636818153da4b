"""
Commandes CLI pour le tri des dumps (sort, identify).
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from src.adapters.cli.helpers import build_container, console, render_summary, suppress_loguru
from src.core.exceptions import CatalogLoadError, DecodeError
from src.services.sorter import SortResult, SortStatus, SortSummary


def sort(
    input_dir: Annotated[
        Optional[Path],
        typer.Option("--input", "-i", help="Repertoire des dumps a trier"),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Repertoire de destination des copies"),
    ] = None,
    catalog_file: Annotated[
        Optional[Path],
        typer.Option("--catalog", "-c", help="Catalogue de releases (XML ou JSON)"),
    ] = None,
    dry_run: Annotated[
        Optional[bool],
        typer.Option("--dry-run/--no-dry-run", help="Identifie les dumps sans les copier"),
    ] = None,
    fallback_region: Annotated[
        Optional[bool],
        typer.Option(
            "--fallback-region/--no-fallback-region",
            help="Retient une variante meme si aucune region preferee n'existe",
        ),
    ] = None,
) -> None:
    """Identifie les dumps 3DS et les copie sous le nom de leur release."""
    container = build_container(
        input_dir=input_dir,
        output_dir=output_dir,
        catalog_file=catalog_file,
        dry_run=dry_run,
        region_fallback=fallback_region,
    )
    settings = container.config()

    try:
        sorter = container.sorter_service()
    except CatalogLoadError as e:
        console.print(f"[red]Erreur de chargement du catalogue: {e}[/red]")
        raise typer.Exit(1)

    summary = SortSummary()
    try:
        for result in sorter.sort_directory(settings.input_dir):
            console.print(_format_result(result))
            summary.add(result)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    with suppress_loguru():
        console.print()
        console.print(render_summary(summary, dry_run=settings.dry_run))


def identify(
    files: Annotated[
        list[Path],
        typer.Argument(help="Dumps dont l'en-tete doit etre decode"),
    ],
) -> None:
    """Affiche le format et le title ID de chaque fichier."""
    container = build_container()
    decoder = container.header_decoder()

    failures = 0
    for path in files:
        try:
            info = decoder.decode_file(path)
        except (DecodeError, OSError) as e:
            console.print(f"[red]{path.name}[/red]: {e}")
            failures += 1
            continue
        console.print(
            f"[cyan]{path.name}[/cyan]: {info.container_format.value} {info.title_id}"
        )

    if failures:
        raise typer.Exit(1)


def _format_result(result: SortResult) -> str:
    """Ligne d'affichage pour le resultat d'un fichier."""
    name = result.source.name
    if result.status == SortStatus.COPIED:
        targets = ", ".join(dest.name for dest in result.destinations)
        return f"[green]Copie[/green] {name} -> {targets}"
    if result.status == SortStatus.MATCHED:
        titles = ", ".join(winner.name for winner in result.winners)
        return f"[cyan]Trouve[/cyan] {titles} pour {name}"
    if result.status == SortStatus.NO_MATCH:
        title_id = result.header_info.title_id if result.header_info else "?"
        return f"[yellow]Aucune correspondance[/yellow] {name} ({title_id})"
    return f"[red]Erreur[/red] {name}: {result.error}"
