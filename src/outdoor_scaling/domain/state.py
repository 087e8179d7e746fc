"""Console host state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from outdoor_scaling.domain.entities import Creature
from outdoor_scaling.domain.scaling_models import PlacementFacts


@dataclass
class WorldState:
    """The player's position plus every creature spawned in this session."""

    player_placement: PlacementFacts
    creatures: Dict[int, Creature] = field(default_factory=dict)
    selected_guid: int | None = None
    next_guid: int = 1

    def allocate_guid(self) -> int:
        guid = self.next_guid
        self.next_guid += 1
        return guid

    def selected_creature(self) -> Creature | None:
        if self.selected_guid is None:
            return None
        return self.creatures.get(self.selected_guid)
