"""Core outdoor scaling models."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from outdoor_scaling.core.types import CreatureEntry, MapId, ZoneId

EXPANSION_TIER_COUNT = 3
MAX_EXPANSION_TIER = EXPANSION_TIER_COUNT - 1


class ScalingSource(Enum):
    """Why a creature received (or did not receive) its multipliers."""

    NONE = "none"
    CONTINENT = "continent"
    ZONE_OVERRIDE = "zone_override"
    CREATURE_OVERRIDE = "creature_override"
    DISABLED = "disabled"
    NOT_OUTDOOR = "not_outdoor"
    PET_OR_GUARDIAN = "pet_or_guardian"

    @property
    def label(self) -> str:
        return _SOURCE_LABELS[self]

    @property
    def is_scaled(self) -> bool:
        return self in _SCALED_SOURCES


_SOURCE_LABELS = {
    ScalingSource.NONE: "Not scaled",
    ScalingSource.CONTINENT: "Continent default",
    ScalingSource.ZONE_OVERRIDE: "Zone override",
    ScalingSource.CREATURE_OVERRIDE: "Creature override",
    ScalingSource.DISABLED: "Module disabled",
    ScalingSource.NOT_OUTDOOR: "Not outdoor continent",
    ScalingSource.PET_OR_GUARDIAN: "Pet/guardian excluded",
}

_SCALED_SOURCES = frozenset(
    {ScalingSource.CONTINENT, ScalingSource.ZONE_OVERRIDE, ScalingSource.CREATURE_OVERRIDE}
)


@dataclass(frozen=True, slots=True)
class ScalingOverride:
    """Health and damage multipliers from a zone or creature override."""

    health: float
    damage: float


@dataclass(frozen=True, slots=True)
class PlacementFacts:
    """Where a unit stands, as reported by the host engine."""

    map_id: MapId
    zone_id: ZoneId
    is_continent: bool
    is_instanced: bool
    expansion: int = 0
    map_name: str = ""

    @property
    def is_outdoor_continent(self) -> bool:
        return self.is_continent and not self.is_instanced


@dataclass(frozen=True, slots=True)
class ScalingResult:
    """Outcome of a single scaling resolution."""

    health_mult: float = 1.0
    damage_mult: float = 1.0
    source: ScalingSource = ScalingSource.NONE
    zone_id: ZoneId = 0
    expansion_tier: int = 0


def _default_tiers() -> tuple[float, ...]:
    return (1.0,) * EXPANSION_TIER_COUNT


@dataclass(frozen=True)
class OutdoorScalingConfig:
    """Immutable scaling configuration, rebuilt wholesale on every reload."""

    enabled: bool = True
    continent_health: tuple[float, ...] = field(default_factory=_default_tiers)
    continent_damage: tuple[float, ...] = field(default_factory=_default_tiers)
    zone_overrides: Mapping[ZoneId, ScalingOverride] = field(default_factory=dict)
    creature_overrides: Mapping[CreatureEntry, ScalingOverride] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("continent_health", "continent_damage"):
            values = tuple(float(value) for value in getattr(self, name))
            if len(values) != EXPANSION_TIER_COUNT:
                raise ValueError(f"{name} needs exactly {EXPANSION_TIER_COUNT} tiers, got {len(values)}.")
            object.__setattr__(self, name, values)
        # Copy so callers cannot mutate the tables after construction.
        object.__setattr__(self, "zone_overrides", MappingProxyType(dict(self.zone_overrides)))
        object.__setattr__(self, "creature_overrides", MappingProxyType(dict(self.creature_overrides)))

    def continent_for_tier(self, tier: int) -> ScalingOverride:
        return ScalingOverride(health=self.continent_health[tier], damage=self.continent_damage[tier])
