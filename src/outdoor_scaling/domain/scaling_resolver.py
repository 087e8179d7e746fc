"""Deterministic resolution of outdoor scaling multipliers."""
from __future__ import annotations

from outdoor_scaling.core.types import CreatureEntry
from outdoor_scaling.domain.scaling_models import (
    MAX_EXPANSION_TIER,
    OutdoorScalingConfig,
    PlacementFacts,
    ScalingResult,
    ScalingSource,
)


def clamp_expansion(expansion: int) -> int:
    """Map an expansion id onto a supported tier; newer content uses the last tier."""
    return max(0, min(expansion, MAX_EXPANSION_TIER))


def resolve_scaling(
    placement: PlacementFacts | None,
    creature_entry: CreatureEntry,
    is_pet_or_guardian: bool,
    config: OutdoorScalingConfig,
) -> ScalingResult:
    """Return the multipliers that apply to a creature at ``placement``.

    The first matching rule wins: disabled module, non-outdoor map,
    pet/guardian, creature override, zone override, continent default.
    A ``creature_entry`` of 0 asks about the location alone.
    """
    zone_id = placement.zone_id if placement is not None else 0

    if not config.enabled:
        return ScalingResult(source=ScalingSource.DISABLED, zone_id=zone_id)

    if placement is None or not placement.is_outdoor_continent:
        return ScalingResult(source=ScalingSource.NOT_OUTDOOR, zone_id=zone_id)

    if is_pet_or_guardian:
        return ScalingResult(source=ScalingSource.PET_OR_GUARDIAN, zone_id=zone_id)

    tier = clamp_expansion(placement.expansion)

    creature_override = config.creature_overrides.get(creature_entry)
    if creature_override is not None:
        return ScalingResult(
            health_mult=creature_override.health,
            damage_mult=creature_override.damage,
            source=ScalingSource.CREATURE_OVERRIDE,
            zone_id=zone_id,
            expansion_tier=tier,
        )

    zone_override = config.zone_overrides.get(zone_id)
    if zone_override is not None:
        return ScalingResult(
            health_mult=zone_override.health,
            damage_mult=zone_override.damage,
            source=ScalingSource.ZONE_OVERRIDE,
            zone_id=zone_id,
            expansion_tier=tier,
        )

    return ScalingResult(
        health_mult=config.continent_health[tier],
        damage_mult=config.continent_damage[tier],
        source=ScalingSource.CONTINENT,
        zone_id=zone_id,
        expansion_tier=tier,
    )
