"""Player-context sentence handed to the chat assistant."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cobbledex.domain.reconciliation import summarize
from cobbledex.domain.view_state import ReadyState

if TYPE_CHECKING:
    from cobbledex.domain.view_state import ViewState

UNAVAILABLE_CONTEXT = "Player context: not available."


def describe_progress(state: ViewState) -> str:
    """Summarize a state snapshot; only non-empty ready states carry counts."""

    if not isinstance(state, ReadyState) or not state.all_entries:
        return UNAVAILABLE_CONTEXT
    summary = summarize(state.all_entries)
    return (
        "Player context: the player has registered "
        f"{summary.captured} of {summary.total} Pokémon in their Pokédex."
    )
