"""
Service de decodage de l'en-tete binaire des dumps 3DS.

Deux dispositions sont reconnues, testees dans cet ordre :
- NCSD (image de carte .3ds) : tag "NCSD" a 0x100, title ID a 0x108-0x110
- NCCH (contenu d'un CIA) : tag "NCCH" a 0x3A40, title ID a 0x3A48-0x3A50

Le title ID est stocke en little-endian et restitue en hexadecimal majuscule.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from src.core.exceptions import TruncatedHeaderError, UnrecognizedFormatError
from src.core.ports.file_system import IFileSystem
from src.core.value_objects import ContainerFormat, HeaderInfo, format_title_id
from src.core.value_objects.header import TITLE_ID_SIZE
from src.utils.constants import (
    MAGIC_SIZE,
    NCCH_MAGIC_OFFSET,
    NCCH_TITLE_ID_OFFSET,
    NCSD_MAGIC_OFFSET,
    NCSD_TITLE_ID_OFFSET,
)


@dataclass(frozen=True)
class FormatLayout:
    """
    Position du tag magique et du title ID pour un format.

    Attributs:
        container_format: Format decrit
        magic_offset: Offset du tag magique (4 octets)
        title_id_offset: Offset du champ title ID (8 octets)
    """

    container_format: ContainerFormat
    magic_offset: int
    title_id_offset: int

    @property
    def end(self) -> int:
        """Fin (exclue) de la fenetre la plus lointaine du format."""
        return max(
            self.magic_offset + MAGIC_SIZE,
            self.title_id_offset + TITLE_ID_SIZE,
        )


@dataclass(frozen=True)
class HeaderLayout:
    """
    Disposition complete de l'en-tete : formats testes dans l'ordre.

    Le premier format dont le tag correspond l'emporte.
    """

    formats: tuple[FormatLayout, ...]

    @property
    def required_size(self) -> int:
        """Nombre d'octets a lire depuis le debut du fichier."""
        return max(layout.end for layout in self.formats)

    @classmethod
    def default(cls) -> "HeaderLayout":
        """Disposition 3DS standard : NCSD prioritaire sur NCCH."""
        return cls(
            formats=(
                FormatLayout(ContainerFormat.NCSD, NCSD_MAGIC_OFFSET, NCSD_TITLE_ID_OFFSET),
                FormatLayout(ContainerFormat.NCCH, NCCH_MAGIC_OFFSET, NCCH_TITLE_ID_OFFSET),
            )
        )


class HeaderDecoder:
    """
    Decodeur d'en-tete : classe le conteneur et extrait le title ID.

    Le decodage est une fonction pure sur le buffer. La lecture du fichier
    passe par le port IFileSystem (decode_file).

    Utilisation:
        decoder = HeaderDecoder()
        info = decoder.decode(data)
        print(info.container_format, info.title_id)
    """

    def __init__(
        self,
        layout: Optional[HeaderLayout] = None,
        file_system: Optional[IFileSystem] = None,
    ) -> None:
        """
        Initialise le decodeur.

        Args:
            layout: Disposition de l'en-tete (defaut: HeaderLayout.default())
            file_system: Port systeme de fichiers, requis pour decode_file
        """
        self._layout = layout or HeaderLayout.default()
        self._fs = file_system

    @property
    def required_size(self) -> int:
        """Taille minimale du buffer accepte par decode."""
        return self._layout.required_size

    def decode(self, data: bytes) -> HeaderInfo:
        """
        Decode l'en-tete d'un dump.

        Args:
            data: Premiers octets du fichier (au moins required_size)

        Returns:
            HeaderInfo avec le title ID et le format detecte

        Raises:
            TruncatedHeaderError: Si le buffer est trop court
            UnrecognizedFormatError: Si aucun tag magique ne correspond
        """
        required = self._layout.required_size
        if len(data) < required:
            raise TruncatedHeaderError(expected=required, actual=len(data))

        for layout in self._layout.formats:
            magic = data[layout.magic_offset:layout.magic_offset + MAGIC_SIZE]
            if magic != layout.container_format.magic:
                continue
            raw_id = data[layout.title_id_offset:layout.title_id_offset + TITLE_ID_SIZE]
            return HeaderInfo(
                title_id=format_title_id(raw_id),
                container_format=layout.container_format,
            )

        raise UnrecognizedFormatError()

    def decode_file(self, path: Path) -> HeaderInfo:
        """
        Lit le debut d'un fichier et decode son en-tete.

        Raises:
            TruncatedHeaderError: Fichier plus court que l'en-tete
            UnrecognizedFormatError: Aucun tag magique reconnu
            OSError: Fichier illisible
        """
        if self._fs is None:
            raise RuntimeError("decode_file requiert un IFileSystem")
        data = self._fs.read_prefix(path, self._layout.required_size)
        info = self.decode(data)
        logger.debug(
            "En-tete decode",
            file=path.name,
            title_id=info.title_id,
            format=info.container_format.value,
        )
        return info
