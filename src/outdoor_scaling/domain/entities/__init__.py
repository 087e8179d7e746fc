"""Runtime entity exports."""

from .creature import Creature
from .stats import CreatureStats, DamageRange, WeaponAttackType

__all__ = [
    "Creature",
    "CreatureStats",
    "DamageRange",
    "WeaponAttackType",
]
