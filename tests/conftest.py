from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cobbledex.adapters.cobblemon import decode_player_data, decode_species
from cobbledex.domain.catalog import CatalogStore
from cobbledex.domain.progress import ProgressImporter
from cobbledex.domain.view_state import PokedexStateMachine
from tests.helpers.catalog import STARTER_TREE, FakeProgressReader, InMemoryAssetSource

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def starter_source() -> InMemoryAssetSource:
    return InMemoryAssetSource(STARTER_TREE)


@pytest.fixture
def progress_reader() -> FakeProgressReader:
    return FakeProgressReader()


@pytest.fixture
def make_store() -> Callable[[InMemoryAssetSource], CatalogStore]:
    def factory(source: InMemoryAssetSource) -> CatalogStore:
        return CatalogStore(source, decode=decode_species)

    return factory


@pytest.fixture
def make_machine(
    progress_reader: FakeProgressReader,
    make_store: Callable[[InMemoryAssetSource], CatalogStore],
) -> Callable[[InMemoryAssetSource], PokedexStateMachine]:
    def factory(source: InMemoryAssetSource) -> PokedexStateMachine:
        importer = ProgressImporter(progress_reader, decode=decode_player_data)
        return PokedexStateMachine(make_store(source), importer)

    return factory
