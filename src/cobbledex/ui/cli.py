# ruff: noqa: T201

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from cobbledex.app import build_catalog_store, build_pokedex, build_progress_importer
from cobbledex.config import (
    ConfigurationError,
    configure_logging,
    get_catalog_config,
    get_progress_config,
)
from cobbledex.domain.assistant_context import describe_progress
from cobbledex.domain.reconciliation import summarize
from cobbledex.domain.view_state import ErrorState, ReadyState

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from cobbledex.config import CatalogConfig, ProgressSourceConfig
    from cobbledex.domain.model import MergedEntry
    from cobbledex.domain.view_state import ViewState

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show Pokédex completion for a catalog")
    parser.add_argument(
        "--catalog-dir",
        type=Path,
        help="Root of the gen<N>/ species tree (defaults to COBBLEDEX_CATALOG_DIR)",
    )
    parser.add_argument(
        "--progress",
        type=str,
        help="Path or URL of a Cobblemon player-data file to overlay",
    )
    parser.add_argument(
        "--generation",
        type=int,
        help="Only display species of this generation",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print every displayed entry, not just the summary",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(list(argv))
    if args.generation is not None and args.generation <= 0:
        raise ValueError("Generation must be a positive integer")
    return args


def _format_entry(entry: MergedEntry) -> str:
    mark = "x" if entry.captured else " "
    suffix = f" ({', '.join(entry.aspects)})" if entry.aspects else ""
    return f"[{mark}] #{entry.national_number:04d} {entry.name} gen{entry.generation}{suffix}"


def _print_report(state: ViewState, *, show_entries: bool) -> None:
    if not isinstance(state, ReadyState):
        print(f"Pokédex not ready: {state.status}")
        return
    overall = summarize(state.all_entries)
    shown = summarize(state.displayed_entries)
    if state.selected_generation is None:
        scope = "all generations"
    else:
        scope = f"generation {state.selected_generation}"
    print(f"Captured {shown.captured}/{shown.total} in {scope}")
    print(f"Overall {overall.captured}/{overall.total} ({overall.ratio:.1%})")
    print(describe_progress(state))
    if show_entries:
        for entry in state.displayed_entries:
            print(_format_entry(entry))


async def _run(
    args: argparse.Namespace,
    config: CatalogConfig,
    progress_config: ProgressSourceConfig,
) -> int:
    pokedex = build_pokedex(
        catalog_store=build_catalog_store(config=config),
        importer=build_progress_importer(config=progress_config),
    )
    state = await pokedex.activate()
    if isinstance(state, ErrorState):
        log.error("Could not load catalog: %s", state.message)
        return 1

    if args.progress:
        result = await pokedex.import_progress(args.progress)
        if not result.ok:
            log.error("Could not import progress: %s", result.error)
            return 1

    if args.generation is not None:
        pokedex.select_generation(args.generation)

    _print_report(pokedex.state, show_entries=args.list)
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        config = get_catalog_config(root_dir=parsed_args.catalog_dir)
        progress_config = get_progress_config()
    except (ValueError, ConfigurationError):
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        exit_code = asyncio.run(_run(parsed_args, config, progress_config))
    except Exception:
        log.exception("Fatal error while building the pokedex")
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point: load `.env`, install the SIGINT handler, run."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
