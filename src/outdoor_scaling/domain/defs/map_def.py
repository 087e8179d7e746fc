"""Map definitions for the console host."""
from __future__ import annotations

from dataclasses import dataclass

from outdoor_scaling.domain.scaling_models import PlacementFacts


@dataclass(frozen=True, slots=True)
class MapDef:
    """Static facts about a map."""

    id: int
    name: str
    is_continent: bool
    instanceable: bool
    expansion: int

    def placement(self, zone_id: int) -> PlacementFacts:
        return PlacementFacts(
            map_id=self.id,
            zone_id=zone_id,
            is_continent=self.is_continent,
            is_instanced=self.instanceable,
            expansion=self.expansion,
            map_name=self.name,
        )
