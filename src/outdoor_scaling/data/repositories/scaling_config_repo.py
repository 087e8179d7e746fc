"""Repository for the outdoor scaling options."""
from __future__ import annotations

import logging
import math
from typing import Dict

from outdoor_scaling.data.repositories.base import RepositoryBase
from outdoor_scaling.domain.override_parser import parse_override_string
from outdoor_scaling.domain.scaling_models import EXPANSION_TIER_COUNT, OutdoorScalingConfig

logger = logging.getLogger(__name__)

OPTION_PREFIX = "OutdoorScaling."
ENABLE_KEY = OPTION_PREFIX + "Enable"
ZONE_OVERRIDES_KEY = OPTION_PREFIX + "ZoneOverrides"
CREATURE_OVERRIDES_KEY = OPTION_PREFIX + "CreatureOverrides"


def continent_key(tier: int, kind: str) -> str:
    """Return the option name for a continent multiplier, e.g. ``OutdoorScaling.Continent.1.Health``."""
    return f"{OPTION_PREFIX}Continent.{tier}.{kind}"


class ScalingConfigRepository(RepositoryBase[OutdoorScalingConfig]):
    """Loads ``outdoor_scaling.json`` into an immutable OutdoorScalingConfig.

    Options are read leniently: a value of the wrong type or a non-positive
    multiplier is reported and replaced by its default instead of failing the
    whole load. Only an unreadable file or a non-object document is an error.
    """

    def __init__(self, base_path=None) -> None:
        super().__init__("outdoor_scaling.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, OutdoorScalingConfig]:
        enabled = self._option_bool(raw, ENABLE_KEY, True)
        continent_health = tuple(
            self._option_multiplier(raw, continent_key(tier, "Health")) for tier in range(EXPANSION_TIER_COUNT)
        )
        continent_damage = tuple(
            self._option_multiplier(raw, continent_key(tier, "Damage")) for tier in range(EXPANSION_TIER_COUNT)
        )
        zone_overrides = parse_override_string(self._option_str(raw, ZONE_OVERRIDES_KEY))
        creature_overrides = parse_override_string(self._option_str(raw, CREATURE_OVERRIDES_KEY))

        unknown = sorted(key for key in raw if key not in _KNOWN_KEYS)
        if unknown:
            logger.warning("Ignoring unknown outdoor scaling options: %s", ", ".join(unknown))

        return {
            "config": OutdoorScalingConfig(
                enabled=enabled,
                continent_health=continent_health,
                continent_damage=continent_damage,
                zone_overrides=zone_overrides,
                creature_overrides=creature_overrides,
            )
        }

    def get_config(self) -> OutdoorScalingConfig:
        self._ensure_loaded()
        assert self._definitions is not None
        return self._definitions["config"]

    @staticmethod
    def _option_bool(raw: dict[str, object], key: str, default: bool) -> bool:
        value = raw.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        logger.warning("Option %s must be a boolean, got %r; using %s.", key, value, default)
        return default

    @staticmethod
    def _option_multiplier(raw: dict[str, object], key: str) -> float:
        value = raw.get(key, 1.0)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            logger.warning("Option %s must be a number, got %r; using 1.0.", key, value)
            return 1.0
        try:
            value = float(value)
        except OverflowError:
            logger.warning("Option %s is too large for a multiplier; using 1.0.", key)
            return 1.0
        if not math.isfinite(value) or value <= 0.0:
            logger.warning("Option %s must be a positive multiplier, got %r; using 1.0.", key, value)
            return 1.0
        return value

    @staticmethod
    def _option_str(raw: dict[str, object], key: str) -> str:
        value = raw.get(key, "")
        if not isinstance(value, str):
            logger.warning("Option %s must be a string, got %r; ignoring it.", key, value)
            return ""
        return value


_KNOWN_KEYS = frozenset(
    {ENABLE_KEY, ZONE_OVERRIDES_KEY, CREATURE_OVERRIDES_KEY}
    | {continent_key(tier, kind) for tier in range(EXPANSION_TIER_COUNT) for kind in ("Health", "Damage")}
)
