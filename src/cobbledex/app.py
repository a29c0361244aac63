"""Application wiring for the pokédex engine."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from cobbledex.adapters.cobblemon import decode_player_data, decode_species
from cobbledex.adapters.filesystem import FileSystemAssetSource
from cobbledex.adapters.progress_reader import HttpProgressReader, LocatorProgressReader
from cobbledex.config import get_catalog_config, get_progress_config
from cobbledex.domain.catalog import CatalogStore
from cobbledex.domain.progress import ProgressImporter
from cobbledex.domain.view_state import PokedexStateMachine

if TYPE_CHECKING:
    from cobbledex.config import CatalogConfig, ProgressSourceConfig
    from cobbledex.domain.ports import AssetSource, ProgressReader

log = getLogger(__name__)


def build_catalog_store(
    *,
    config: CatalogConfig | None = None,
    source: AssetSource | None = None,
) -> CatalogStore:
    """Create the catalog store; one instance should live for the whole process."""

    effective_config = config or get_catalog_config()
    effective_source = source or FileSystemAssetSource(effective_config.resolve_root_dir())
    log.debug("Catalog store reading from %s", effective_config.root_dir)
    return CatalogStore(
        effective_source,
        decode=decode_species,
        record_suffix=effective_config.record_suffix,
    )


def build_progress_importer(
    *,
    config: ProgressSourceConfig | None = None,
    reader: ProgressReader | None = None,
) -> ProgressImporter:
    effective_reader = reader or LocatorProgressReader(
        http_reader=HttpProgressReader(config=config or get_progress_config())
    )
    return ProgressImporter(effective_reader, decode=decode_player_data)


def build_pokedex(
    *,
    catalog_store: CatalogStore | None = None,
    importer: ProgressImporter | None = None,
) -> PokedexStateMachine:
    """Assemble a state machine from explicitly constructed collaborators."""

    return PokedexStateMachine(
        catalog_store or build_catalog_store(),
        importer or build_progress_importer(),
    )
