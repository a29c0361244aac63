"""Pydantic models describing Cobblemon species and player-data payloads."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class CobblemonBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class StatsPayload(CobblemonBaseModel):
    hp: int
    attack: int = Field(validation_alias=AliasChoices("attack", "atk"))
    defense: int = Field(validation_alias=AliasChoices("defense", "defence", "def"))
    special_attack: int = Field(
        validation_alias=AliasChoices("specialAttack", "special_attack", "spa")
    )
    special_defense: int = Field(
        validation_alias=AliasChoices(
            "specialDefense", "special_defense", "specialDefence", "special_defence", "spd"
        )
    )
    speed: int = Field(validation_alias=AliasChoices("speed", "spe"))


class EvolutionPayload(CobblemonBaseModel):
    result: str
    level: int | None = None
    item: str | None = None

    _normalize_item = field_validator("item", mode="before")(_blank_to_none)


class SpeciesPayload(CobblemonBaseModel):
    """One ``<name>.json`` record of a generation partition.

    A ``generation`` key may be present in the payload; it is ignored because the
    loader assigns generations from the partition name.
    """

    name: str
    national_pokedex_number: int = Field(alias="nationalPokedexNumber")
    primary_type: str = Field(alias="primaryType")
    secondary_type: str | None = Field(default=None, alias="secondaryType")
    abilities: list[str] = Field(default_factory=list[str])
    base_stats: StatsPayload = Field(alias="baseStats")
    catch_rate: int = Field(default=0, alias="catchRate")
    male_ratio: float | None = Field(default=None, alias="maleRatio")
    female_ratio: float | None = Field(default=None, alias="femaleRatio")
    evolutions: list[EvolutionPayload] | None = None
    spawn_biomes: list[str] | None = Field(default=None, alias="spawnBiomes")

    _normalize_secondary = field_validator("secondary_type", mode="before")(_blank_to_none)


class ProgressBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, strict=True, frozen=True)


class AdvancementDataPayload(ProgressBaseModel):
    total_capture_count: int = Field(alias="totalCaptureCount")
    aspects_collected: dict[str, list[str]] = Field(alias="aspectsCollected")


class PlayerDataPayload(ProgressBaseModel):
    """Top-level Cobblemon player-data document."""

    uuid: str
    starter_prompted: bool = Field(alias="starterPrompted")
    starter_locked: bool = Field(alias="starterLocked")
    starter_selected: bool = Field(alias="starterSelected")
    starter_uuid: str | None = Field(default=None, alias="starterUUID")
    advancement_data: AdvancementDataPayload = Field(alias="advancementData")
