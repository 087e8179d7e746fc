"""Repository exports."""

from .creature_templates_repo import CreatureTemplatesRepository
from .maps_repo import MapsRepository
from .scaling_config_repo import ScalingConfigRepository
from .world_rates_repo import WorldRatesRepository

__all__ = [
    "CreatureTemplatesRepository",
    "MapsRepository",
    "ScalingConfigRepository",
    "WorldRatesRepository",
]
