"""
Service d'orchestration du tri des dumps.

Pour chaque fichier d'entree :
1. Decodage de l'en-tete (fichier ignore en cas d'erreur)
2. Recherche des variantes dans le catalogue
3. Resolution de la variante regionale preferee
4. Copie vers le repertoire de sortie sous le nom nettoye de la variante

Chaque fichier est traite entierement avant le suivant. Les erreurs d'un
fichier n'interrompent pas le traitement des autres.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional

from loguru import logger

from src.core.entities import CatalogRecord
from src.core.exceptions import CopyError, DecodeError
from src.core.ports.file_system import IFileSystem
from src.core.value_objects import HeaderInfo
from src.services.catalog_index import CatalogIndex
from src.services.header_decoder import HeaderDecoder
from src.services.region_resolver import RegionResolver
from src.services.renamer import OutputNaming
from src.utils.constants import GAME_EXTENSIONS


class SortStatus(Enum):
    """
    Issue du traitement d'un fichier.

    COPIED: Au moins une variante trouvee et copiee
    MATCHED: Variante trouvee, copie non effectuee (dry-run)
    NO_MATCH: Aucune variante retenue dans le catalogue
    ERROR: En-tete illisible ou copie en echec
    """

    COPIED = "copied"
    MATCHED = "matched"
    NO_MATCH = "no_match"
    ERROR = "error"


@dataclass
class SortResult:
    """
    Resultat du traitement d'un fichier.

    Attributs:
        source: Chemin du fichier source
        status: Issue du traitement
        header_info: En-tete decode (None si le decodage a echoue)
        winners: Variantes retenues par la resolution regionale
        destinations: Chemins de sortie (copies ou prevus en dry-run)
        error: Message d'erreur (si status == ERROR)
    """

    source: Path
    status: SortStatus
    header_info: Optional[HeaderInfo] = None
    winners: list[CatalogRecord] = field(default_factory=list)
    destinations: list[Path] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class SortSummary:
    """Compteurs agreges sur un lot de fichiers."""

    total: int = 0
    copied: int = 0
    matched: int = 0
    no_match: int = 0
    errors: int = 0

    def add(self, result: SortResult) -> None:
        """Comptabilise un resultat."""
        self.total += 1
        if result.status == SortStatus.COPIED:
            self.copied += 1
        elif result.status == SortStatus.MATCHED:
            self.matched += 1
        elif result.status == SortStatus.NO_MATCH:
            self.no_match += 1
        else:
            self.errors += 1


class SorterService:
    """
    Service orchestrant decodage, recherche, resolution et copie.

    Coordonne:
    - Le systeme de fichiers (IFileSystem) pour lister et copier les dumps
    - Le decodeur d'en-tete (HeaderDecoder)
    - L'index du catalogue (CatalogIndex)
    - Le resolveur regional (RegionResolver)
    - Le nommage des sorties (OutputNaming)

    Utilisation:
        sorter = SorterService(fs, decoder, index, resolver, naming, Path("output"))
        for result in sorter.sort_directory(Path("input")):
            print(result.source.name, result.status.value)
    """

    def __init__(
        self,
        file_system: IFileSystem,
        decoder: HeaderDecoder,
        catalog: CatalogIndex,
        resolver: RegionResolver,
        naming: OutputNaming,
        output_dir: Path,
        dry_run: bool = False,
    ) -> None:
        """
        Initialise le service de tri.

        Args:
            file_system: Implementation de IFileSystem
            decoder: Decodeur d'en-tete
            catalog: Index du catalogue charge
            resolver: Resolveur des variantes regionales
            naming: Generateur des noms de sortie
            output_dir: Repertoire de destination des copies
            dry_run: Si True, rapporte les correspondances sans copier
        """
        self._fs = file_system
        self._decoder = decoder
        self._catalog = catalog
        self._resolver = resolver
        self._naming = naming
        self._output_dir = Path(output_dir)
        self._dry_run = dry_run

    def sort_directory(
        self,
        input_dir: Path,
        extensions: frozenset[str] = GAME_EXTENSIONS,
    ) -> Iterator[SortResult]:
        """
        Trie tous les dumps reconnus d'un repertoire.

        Args:
            input_dir: Repertoire d'entree (non recursif)
            extensions: Extensions acceptees

        Yields:
            SortResult pour chaque fichier, dans l'ordre des noms

        Raises:
            FileNotFoundError: Si le repertoire d'entree n'existe pas
        """
        input_dir = Path(input_dir)
        if not self._fs.exists(input_dir):
            raise FileNotFoundError(f"Repertoire d'entree introuvable: {input_dir}")

        for path in self._fs.list_files(input_dir, extensions):
            yield self.sort_file(path)

    def sort_file(self, path: Path) -> SortResult:
        """
        Traite un fichier : decodage, recherche, resolution, copie.

        Args:
            path: Chemin du dump

        Returns:
            SortResult decrivant l'issue du traitement
        """
        try:
            header_info = self._decoder.decode_file(path)
        except (DecodeError, OSError) as e:
            logger.warning("En-tete illisible, fichier ignore", file=path.name, error=str(e))
            return SortResult(source=path, status=SortStatus.ERROR, error=str(e))

        candidates = self._catalog.lookup(header_info.title_id)
        winners = self._resolver.resolve(candidates)
        if not winners:
            logger.info(
                "Aucune correspondance",
                file=path.name,
                title_id=header_info.title_id,
                candidates=len(candidates),
            )
            return SortResult(
                source=path, status=SortStatus.NO_MATCH, header_info=header_info
            )

        result = SortResult(
            source=path,
            status=SortStatus.MATCHED if self._dry_run else SortStatus.COPIED,
            header_info=header_info,
            winners=winners,
        )

        for winner in winners:
            try:
                destination = self._destination_for(winner, header_info)
                if self._dry_run:
                    logger.info("Titre trouve", title=winner.name, file=path.name)
                else:
                    self._copy(path, destination)
            except CopyError as e:
                logger.error("Echec de la copie", file=path.name, error=str(e))
                result.status = SortStatus.ERROR
                result.error = str(e)
                continue
            result.destinations.append(destination)

        return result

    def _destination_for(self, winner: CatalogRecord, header_info: HeaderInfo) -> Path:
        """Chemin de sortie d'une variante gagnante."""
        try:
            filename = self._naming.build_filename(winner, header_info.container_format)
        except ValueError as e:
            raise CopyError(str(e)) from e
        return self._output_dir / filename

    def _copy(self, source: Path, destination: Path) -> None:
        """
        Copie un dump vers sa destination sans jamais ecraser.

        Raises:
            CopyError: Destination deja existante ou copie en echec
        """
        if self._fs.exists(destination):
            raise CopyError(
                f"Destination deja existante: {destination.name}",
                destination=str(destination),
            )

        logger.info("Copie en cours", source=source.name, destination=destination.name)
        if not self._fs.copy(source, destination):
            raise CopyError(
                f"Copie impossible vers {destination}", destination=str(destination)
            )
        logger.debug("Copie terminee", destination=str(destination))
