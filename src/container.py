"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour l'interface CLI :
configuration, adaptateurs (systeme de fichiers, catalogue) et services.
"""

from dependency_injector import containers, providers

from .adapters.catalog import create_catalog_source
from .adapters.file_system import FileSystemAdapter
from .config import Settings
from .services.catalog_index import load_catalog_index
from .services.header_decoder import HeaderDecoder
from .services.region_resolver import RegionResolver
from .services.renamer import OutputNaming
from .services.sorter import SorterService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        sorter = container.sorter_service()
        index = container.catalog_index()

    Pour surcharger la configuration (options CLI, tests) :
        container.config.override(providers.Object(settings))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    catalog_source = providers.Singleton(
        create_catalog_source,
        path=config.provided.catalog_file,
    )

    # Catalogue charge une seule fois, en lecture seule ensuite
    catalog_index = providers.Singleton(
        load_catalog_index,
        source=catalog_source,
    )

    # Services stateless - Singletons
    header_decoder = providers.Singleton(
        HeaderDecoder,
        file_system=file_system,
    )
    region_resolver = providers.Singleton(
        RegionResolver,
        priority=config.provided.region_priority,
        fallback_to_any_region=config.provided.region_fallback,
    )
    output_naming = providers.Singleton(
        OutputNaming,
        cartridge_suffix=config.provided.cartridge_suffix,
        package_suffix=config.provided.package_suffix,
    )

    # Service de tri - Factory car depend des chemins et du mode dry-run
    sorter_service = providers.Factory(
        SorterService,
        file_system=file_system,
        decoder=header_decoder,
        catalog=catalog_index,
        resolver=region_resolver,
        naming=output_naming,
        output_dir=config.provided.output_dir,
        dry_run=config.provided.dry_run,
    )
