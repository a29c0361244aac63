"""Translate Cobblemon payloads into domain records."""

from __future__ import annotations

from cobbledex.domain.model import (
    BaseStats,
    Evolution,
    ProgressRecord,
    SpeciesDefinition,
)

from .schema import PlayerDataPayload, SpeciesPayload


def translate_species(payload: SpeciesPayload, *, generation: int) -> SpeciesDefinition:
    stats = payload.base_stats
    female_ratio = payload.female_ratio
    if female_ratio is None and payload.male_ratio is not None and payload.male_ratio >= 0:
        female_ratio = round(1.0 - payload.male_ratio, 6)
    evolutions = (
        tuple(
            Evolution(result=evolution.result, level=evolution.level, item=evolution.item)
            for evolution in payload.evolutions
        )
        if payload.evolutions is not None
        else None
    )
    return SpeciesDefinition(
        name=payload.name,
        national_number=payload.national_pokedex_number,
        generation=generation,
        primary_type=payload.primary_type,
        secondary_type=payload.secondary_type,
        abilities=tuple(payload.abilities),
        base_stats=BaseStats(
            hp=stats.hp,
            attack=stats.attack,
            defense=stats.defense,
            special_attack=stats.special_attack,
            special_defense=stats.special_defense,
            speed=stats.speed,
        ),
        catch_rate=payload.catch_rate,
        male_ratio=payload.male_ratio,
        female_ratio=female_ratio,
        evolutions=evolutions,
        spawn_biomes=tuple(payload.spawn_biomes) if payload.spawn_biomes is not None else None,
    )


def translate_player_data(payload: PlayerDataPayload) -> ProgressRecord:
    advancement = payload.advancement_data
    return ProgressRecord(
        uuid=payload.uuid,
        starter_prompted=payload.starter_prompted,
        starter_locked=payload.starter_locked,
        starter_selected=payload.starter_selected,
        starter_uuid=payload.starter_uuid,
        total_capture_count=advancement.total_capture_count,
        aspects_collected={
            key: tuple(tags) for key, tags in advancement.aspects_collected.items()
        },
    )


def decode_species(raw: bytes, *, generation: int) -> SpeciesDefinition:
    """Decode one UTF-8 JSON species record.

    Raises ``pydantic.ValidationError`` (a ``ValueError``) for malformed JSON, invalid
    UTF-8 or payloads missing required fields.
    """

    return translate_species(SpeciesPayload.model_validate_json(raw), generation=generation)


def decode_player_data(raw: bytes) -> ProgressRecord:
    """Decode a whole player-data document, rejecting partial or mistyped records."""

    return translate_player_data(PlayerDataPayload.model_validate_json(raw))
