"""Diagnostic reports for outdoor scaling."""
from __future__ import annotations

from typing import Dict, List

from outdoor_scaling.core.types import CreatureGuid
from outdoor_scaling.domain.entities import Creature
from outdoor_scaling.domain.scaling_models import (
    OutdoorScalingConfig,
    PlacementFacts,
    ScalingOverride,
    ScalingResult,
    ScalingSource,
)

SEPARATOR = "---"


class InspectionService:
    """Keeps the last scaling result per creature and renders report text.

    The cached results only feed the reports; scaling is always resolved
    again from the live configuration before being applied.
    """

    def __init__(self) -> None:
        self._last_results: Dict[CreatureGuid, ScalingResult] = {}

    def record(self, guid: CreatureGuid, result: ScalingResult) -> None:
        self._last_results[guid] = result

    def last_result(self, guid: CreatureGuid) -> ScalingResult | None:
        return self._last_results.get(guid)

    def forget(self, guid: CreatureGuid) -> None:
        self._last_results.pop(guid, None)

    def map_report(
        self,
        placement: PlacementFacts,
        config: OutdoorScalingConfig,
        result: ScalingResult,
    ) -> List[str]:
        lines = [
            SEPARATOR,
            f"{placement.map_name} (Map {placement.map_id}), Zone {placement.zone_id}",
        ]
        if result.source is ScalingSource.DISABLED:
            lines.append("Outdoor scaling is disabled.")
            return lines
        if result.source is ScalingSource.NOT_OUTDOOR:
            lines.append("Outdoor scaling not active on this map.")
            return lines
        lines.append(_continent_line(config, result.expansion_tier))
        lines.append(_override_line("Zone override", config.zone_overrides.get(placement.zone_id)))
        lines.append(_active_line(result))
        return lines

    def creature_report(
        self,
        creature: Creature,
        config: OutdoorScalingConfig,
        result: ScalingResult,
    ) -> List[str]:
        self.record(creature.guid, result)
        zone_id = creature.placement.zone_id if creature.placement is not None else 0
        map_id = creature.placement.map_id if creature.placement is not None else 0
        return [
            SEPARATOR,
            f"{creature.name} (Entry {creature.entry}), Zone {zone_id}, Map {map_id}",
            _continent_line(config, result.expansion_tier),
            _override_line("Zone override", config.zone_overrides.get(zone_id)),
            _override_line("Creature override", config.creature_overrides.get(creature.entry)),
            _active_line(result),
        ]


def _continent_line(config: OutdoorScalingConfig, tier: int) -> str:
    base = config.continent_for_tier(tier)
    return f"Continent base (exp {tier}): HP x{base.health:.2f}, Damage x{base.damage:.2f}"


def _override_line(label: str, override: ScalingOverride | None) -> str:
    if override is None:
        return f"{label}: none"
    return f"{label}: HP x{override.health:.2f}, Damage x{override.damage:.2f}"


def _active_line(result: ScalingResult) -> str:
    return (
        f"Active outdoor scaling: HP x{result.health_mult:.2f}, "
        f"Damage x{result.damage_mult:.2f} ({result.source.label})"
    )
