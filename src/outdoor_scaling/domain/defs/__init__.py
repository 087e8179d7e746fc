"""Domain definition exports."""

from outdoor_scaling.domain.unit_types import CreatureRank

from .creature_template_def import CreatureTemplateDef
from .map_def import MapDef

__all__ = [
    "CreatureRank",
    "CreatureTemplateDef",
    "MapDef",
]
