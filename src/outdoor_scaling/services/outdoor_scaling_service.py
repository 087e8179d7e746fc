"""Host-facing hooks for outdoor creature scaling."""
from __future__ import annotations

import logging
from typing import List

from outdoor_scaling.data.repositories import WorldRatesRepository
from outdoor_scaling.domain.entities import Creature
from outdoor_scaling.domain.scaling_models import PlacementFacts, ScalingResult
from outdoor_scaling.domain.scaling_resolver import resolve_scaling
from outdoor_scaling.domain.stat_applier import apply_scaling, scale_spell_damage
from outdoor_scaling.services.config_store import ScalingConfigStore
from outdoor_scaling.services.inspection_service import InspectionService

logger = logging.getLogger(__name__)

# Creature entry used for location-only queries.
NO_CREATURE_ENTRY = 0


class OutdoorScalingService:
    """Wires the resolver and applier to creature spawn, damage and reload events."""

    def __init__(
        self,
        config_store: ScalingConfigStore,
        world_rates_repo: WorldRatesRepository,
        inspection: InspectionService | None = None,
    ) -> None:
        self._config_store = config_store
        self._world_rates_repo = world_rates_repo
        self._inspection = inspection or InspectionService()

    @property
    def inspection(self) -> InspectionService:
        return self._inspection

    def on_config_load(self, *, reload: bool = False) -> bool:
        return self._config_store.load(reload=reload)

    def compute(self, creature: Creature) -> ScalingResult:
        """Resolve scaling for ``creature`` and refresh its inspection record."""
        result = resolve_scaling(
            creature.placement,
            creature.entry,
            creature.is_pet_or_guardian,
            self._config_store.snapshot(),
        )
        self._inspection.record(creature.guid, result)
        return result

    def on_creature_select_level(self, creature: Creature) -> ScalingResult:
        """Scale a creature's health and weapon damage after the engine set its level stats."""
        result = self.compute(creature)
        if not result.source.is_scaled:
            return result
        rates = self._world_rates_repo.rates_for_rank(creature.rank)
        if apply_scaling(creature.stats, result, rates):
            logger.debug(
                "Scaled creature %s (entry %s): HP x%.2f, Damage x%.2f via %s -> max health %d",
                creature.guid,
                creature.entry,
                result.health_mult,
                result.damage_mult,
                result.source.label,
                creature.stats.max_health,
            )
        return result

    def on_creature_removed(self, creature: Creature) -> None:
        """Drop the inspection record of a despawned creature."""
        self._inspection.forget(creature.guid)

    def modify_spell_damage_taken(self, target: object, attacker: object, damage: int) -> int:
        """Return ``damage`` adjusted for the attacking creature's outdoor scaling."""
        if attacker is None or damage == 0 or not isinstance(attacker, Creature):
            return damage
        result = self.compute(attacker)
        rates = self._world_rates_repo.rates_for_rank(attacker.rank)
        return scale_spell_damage(damage, result, rates)

    def map_report(self, placement: PlacementFacts) -> List[str]:
        config = self._config_store.snapshot()
        result = resolve_scaling(placement, NO_CREATURE_ENTRY, False, config)
        return self._inspection.map_report(placement, config, result)

    def creature_report(self, creature: Creature) -> List[str]:
        config = self._config_store.snapshot()
        result = resolve_scaling(creature.placement, creature.entry, creature.is_pet_or_guardian, config)
        return self._inspection.creature_report(creature, config, result)
