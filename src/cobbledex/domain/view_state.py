"""Pokédex view state and the machine that owns its transitions.

``ViewState`` is a closed union of immutable snapshots. ``PokedexStateMachine`` is the
only component holding mutable state; every transition replaces the published
snapshot wholesale and notifies subscribers.

Transitions::

    Idle -> Loading -> Ready | Error
    Ready -> Ready      (generation selected, progress imported)
    Error -> Loading    (explicit retry only)
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from cobbledex.domain.catalog import CatalogLoadError
from cobbledex.domain.progress import ProgressImportError
from cobbledex.domain.reconciliation import filter_by_generation, reconcile

if TYPE_CHECKING:
    from cobbledex.domain.catalog import CatalogStore
    from cobbledex.domain.model import Catalog, MergedEntry, ProgressRecord, SpeciesDefinition
    from cobbledex.domain.progress import ProgressImporter

log = getLogger(__name__)


class ViewStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True, slots=True, kw_only=True)
class IdleState:
    """No catalog has been requested yet."""

    status: Literal[ViewStatus.IDLE] = ViewStatus.IDLE


@dataclass(frozen=True, slots=True, kw_only=True)
class LoadingState:
    """A catalog load is in flight."""

    status: Literal[ViewStatus.LOADING] = ViewStatus.LOADING


@dataclass(frozen=True, slots=True, kw_only=True)
class ReadyState:
    """Reconciled entries plus the generation-filtered view derived from them.

    ``displayed_entries`` is not an init argument; it is always derived from
    ``all_entries`` and ``selected_generation``.
    """

    all_entries: tuple[MergedEntry, ...]
    displayed_entries: tuple[MergedEntry, ...] = field(init=False)
    selected_generation: int | None = None
    status: Literal[ViewStatus.READY] = ViewStatus.READY

    def __post_init__(self) -> None:
        displayed = filter_by_generation(self.all_entries, self.selected_generation)
        object.__setattr__(self, "displayed_entries", displayed)

    @classmethod
    def build(
        cls,
        all_entries: tuple[MergedEntry, ...],
        *,
        selected_generation: int | None = None,
    ) -> ReadyState:
        return cls(all_entries=all_entries, selected_generation=selected_generation)

    def with_generation(self, generation: int | None) -> ReadyState:
        return ReadyState.build(self.all_entries, selected_generation=generation)

    def with_entries(self, all_entries: tuple[MergedEntry, ...]) -> ReadyState:
        return ReadyState.build(all_entries, selected_generation=self.selected_generation)


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorState:
    message: str
    status: Literal[ViewStatus.ERROR] = ViewStatus.ERROR


type ViewState = IdleState | LoadingState | ReadyState | ErrorState
type StateListener = Callable[[ViewState], None]

IDLE = IdleState()
LOADING = LoadingState()


@dataclass(frozen=True, slots=True, kw_only=True)
class ProgressImportResult:
    """Outcome of ``PokedexStateMachine.import_progress``.

    ``applied`` is true when the record was merged into a ready view right away;
    otherwise a successful record is held until the catalog becomes ready.
    """

    locator: str
    record: ProgressRecord | None = None
    error: ProgressImportError | None = None
    applied: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


class PokedexStateMachine:
    """Expose catalog loading, progress imports and generation filtering as states."""

    def __init__(self, catalog_store: CatalogStore, importer: ProgressImporter) -> None:
        self._store = catalog_store
        self._importer = importer
        self._state: ViewState = IDLE
        self._catalog: Catalog | None = None
        self._progress: ProgressRecord | None = None
        self._listeners: list[StateListener] = []
        self._activated = False
        self._load_task: asyncio.Future[None] | None = None
        self._import_lock = asyncio.Lock()

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def latest_progress(self) -> ProgressRecord | None:
        return self._progress

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` for every published snapshot; return an unsubscribe hook."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def activate(self) -> ViewState:
        """Load the catalog on first call; later calls await or return the outcome."""

        if self._activated:
            await self._await_pending_load()
            return self._state
        self._activated = True
        return await self._start_load()

    async def retry(self) -> ViewState:
        """Reload the catalog after a failed load."""

        if not isinstance(self._state, ErrorState):
            log.warning("Cannot retry, state is %s", self._state.status)
            await self._await_pending_load()
            return self._state
        return await self._start_load()

    def select_generation(self, generation: int | None) -> None:
        state = self._state
        if not isinstance(state, ReadyState):
            log.warning("Cannot select generation %s, state is %s", generation, state.status)
            return
        self._publish(state.with_generation(generation))

    async def import_progress(self, locator: str) -> ProgressImportResult:
        """Parse ``locator`` and merge it into the view.

        Imports are applied one at a time in call order. A failed import leaves the
        current state untouched.
        """

        async with self._import_lock:
            try:
                record = await self._importer.parse(locator)
            except ProgressImportError as exc:
                log.warning("Progress import from %s failed: %s", locator, exc)
                return ProgressImportResult(locator=locator, error=exc)

            self._progress = record
            state = self._state
            if isinstance(state, ReadyState) and self._catalog is not None:
                self._publish(state.with_entries(reconcile(self._catalog, record)))
                return ProgressImportResult(locator=locator, record=record, applied=True)

            log.info("Holding progress for %s until the catalog is ready", record.uuid)
            return ProgressImportResult(locator=locator, record=record)

    async def lookup_species(self, name: str) -> SpeciesDefinition | None:
        return await self._store.get_species(name)

    async def _start_load(self) -> ViewState:
        self._publish(LOADING)
        task = asyncio.ensure_future(self._load())
        self._load_task = task
        await asyncio.shield(task)
        return self._state

    async def _await_pending_load(self) -> None:
        task = self._load_task
        if task is not None and not task.done():
            await asyncio.shield(task)

    async def _load(self) -> None:
        try:
            catalog = await self._store.load()
        except CatalogLoadError as exc:
            log.error("Catalog load failed: %s", exc)
            self._publish(ErrorState(message=str(exc)))
            return
        except Exception as exc:
            log.exception("Unexpected error during catalog load")
            self._publish(ErrorState(message=f"Unexpected error during catalog load: {exc}"))
            return

        self._catalog = catalog
        if len(catalog) == 0:
            log.info("Catalog is empty; publishing an empty pokedex")
        self._publish(ReadyState.build(reconcile(catalog, self._progress)))

    def _publish(self, state: ViewState) -> None:
        self._state = state
        for listener in tuple(self._listeners):
            try:
                listener(state)
            except Exception:
                log.exception("State listener failed")
