"""Creature runtime models."""
from __future__ import annotations

from dataclasses import dataclass

from outdoor_scaling.domain.unit_types import CreatureRank
from outdoor_scaling.domain.scaling_models import PlacementFacts

from .stats import CreatureStats


@dataclass(slots=True)
class Creature:
    """A spawned creature as seen by the scaling hooks."""

    guid: int
    entry: int
    name: str
    rank: CreatureRank
    placement: PlacementFacts | None
    stats: CreatureStats
    is_pet: bool = False
    is_guardian: bool = False

    @property
    def is_pet_or_guardian(self) -> bool:
        return self.is_pet or self.is_guardian
