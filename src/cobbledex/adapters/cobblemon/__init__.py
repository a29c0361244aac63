"""Cobblemon payload adapter package."""

from __future__ import annotations

from .schema import (
    AdvancementDataPayload,
    EvolutionPayload,
    PlayerDataPayload,
    SpeciesPayload,
    StatsPayload,
)
from .translator import (
    decode_player_data,
    decode_species,
    translate_player_data,
    translate_species,
)

__all__ = [
    "AdvancementDataPayload",
    "EvolutionPayload",
    "PlayerDataPayload",
    "SpeciesPayload",
    "StatsPayload",
    "decode_player_data",
    "decode_species",
    "translate_player_data",
    "translate_species",
]
