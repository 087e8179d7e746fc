"""Creature template definitions."""
from __future__ import annotations

from dataclasses import dataclass

from outdoor_scaling.domain.unit_types import CreatureRank, WeaponAttackType


@dataclass(frozen=True, slots=True)
class CreatureTemplateDef:
    """Unscaled stats for a creature entry."""

    entry: int
    name: str
    rank: CreatureRank
    health: int
    damage: dict[WeaponAttackType, tuple[float, float]]
