"""Process-lifetime species catalog loading and caching.

The store reads a partitioned asset tree (``gen1/``, ``gen2/``, ...) once, caches the
result and shares one in-flight load between concurrent callers. Bad leaf entries
are dropped with a diagnostic; only an unreadable root is fatal to a load.
"""

from __future__ import annotations

import asyncio
import re
from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING, Final

from cobbledex.domain.model import Catalog, SkippedEntry

if TYPE_CHECKING:
    from cobbledex.domain.model import SpeciesDefinition
    from cobbledex.domain.ports import AssetSource, SpeciesDecoder

log = getLogger(__name__)

DEFAULT_RECORD_SUFFIX: Final[str] = ".json"
_PARTITION_PATTERN: Final[re.Pattern[str]] = re.compile(r"gen(\d+)")


class CatalogLoadError(RuntimeError):
    """Raised when the catalog asset source cannot be enumerated at all."""


def parse_partition_name(name: str) -> int | None:
    """Return ``N`` for a ``genN`` partition name, or ``None`` if it does not match."""

    match = _PARTITION_PATTERN.fullmatch(name)
    if match is None:
        return None
    generation = int(match.group(1))
    return generation if generation > 0 else None


class CatalogStore:
    """Load the species catalog exactly once and serve it from memory afterwards."""

    def __init__(
        self,
        source: AssetSource,
        *,
        decode: SpeciesDecoder,
        record_suffix: str = DEFAULT_RECORD_SUFFIX,
    ) -> None:
        self._source = source
        self._decode = decode
        self._record_suffix = record_suffix
        self._catalog: Catalog | None = None
        self._pending: asyncio.Future[Catalog] | None = None

    @property
    def cached(self) -> Catalog | None:
        return self._catalog

    async def load(self) -> Catalog:
        """Return the cached catalog, loading it on first use.

        Callers arriving while a load is in flight await the same task and observe the
        same catalog or the same ``CatalogLoadError``. Cancelling one caller leaves the
        shared load running for the others.
        """

        if self._catalog is not None:
            return self._catalog
        if self._pending is None:
            pending = asyncio.ensure_future(self._load_once())
            pending.add_done_callback(self._clear_pending)
            self._pending = pending
        return await asyncio.shield(self._pending)

    async def get_species(self, name: str) -> SpeciesDefinition | None:
        catalog = await self.load()
        return catalog.get(name)

    def reset(self) -> None:
        """Forget the cached catalog. Intended for tests."""

        self._catalog = None

    def _clear_pending(self, future: asyncio.Future[Catalog]) -> None:
        if self._pending is future:
            self._pending = None
        if not future.cancelled() and future.exception() is not None:
            log.debug("Catalog load failed and was not cached")

    async def _load_once(self) -> Catalog:
        log.info("Loading species catalog")
        try:
            top_level = await self._source.list_entries("")
        except OSError as exc:
            log.exception("Cannot list catalog root")
            raise CatalogLoadError(f"Cannot list catalog root: {exc}") from exc

        partitions = self._discover_partitions(top_level)
        if not partitions:
            log.warning("No generation partitions found in catalog root")

        species: dict[str, SpeciesDefinition] = {}
        skipped: list[SkippedEntry] = []
        for generation, partition in partitions:
            await self._load_partition(partition, generation, species, skipped)

        catalog = Catalog(species=species, skipped=tuple(skipped))
        self._catalog = catalog
        log.info(
            "Finished loading catalog: species=%s, partitions=%s, skipped=%s",
            len(catalog),
            len(partitions),
            len(catalog.skipped),
        )
        return catalog

    def _discover_partitions(self, names: list[str]) -> list[tuple[int, str]]:
        partitions: list[tuple[int, str]] = []
        for name in names:
            generation = parse_partition_name(name)
            if generation is None:
                log.debug("Skipping non-generation catalog entry %s", name)
                continue
            partitions.append((generation, name))
        partitions.sort()
        return partitions

    async def _load_partition(
        self,
        partition: str,
        generation: int,
        species: dict[str, SpeciesDefinition],
        skipped: list[SkippedEntry],
    ) -> None:
        try:
            entries = await self._source.list_entries(partition)
        except OSError as exc:
            log.exception("Cannot list catalog partition %s", partition)
            skipped.append(SkippedEntry(path=partition, reason=str(exc)))
            return

        record_names = sorted(name for name in entries if name.endswith(self._record_suffix))
        log.debug("Processing partition %s with %s records", partition, len(record_names))
        for file_name in record_names:
            path = f"{partition}/{file_name}"
            try:
                raw = await self._source.read_entry(path)
                definition = self._decode(raw, generation=generation)
            except (OSError, ValueError) as exc:
                log.exception("Error reading/parsing catalog entry %s", path)
                skipped.append(SkippedEntry(path=path, reason=str(exc)))
                continue
            if definition.generation != generation:
                definition = replace(definition, generation=generation)

            key = file_name.removesuffix(self._record_suffix).lower()
            if key in species:
                log.debug("Catalog key %s from %s replaces an earlier entry", key, path)
            species[key] = definition
