"""Combat stat models for spawned creatures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from outdoor_scaling.domain.unit_types import WeaponAttackType


@dataclass(slots=True)
class DamageRange:
    """Minimum and maximum weapon damage."""

    min_damage: float = 0.0
    max_damage: float = 0.0


def _empty_weapon_damage() -> Dict[WeaponAttackType, DamageRange]:
    return {attack_type: DamageRange() for attack_type in WeaponAttackType}


@dataclass(slots=True)
class CreatureStats:
    """Health pools and weapon damage of a creature after level selection."""

    create_health: int
    max_health: int
    health: int
    health_base_modifier: float
    weapon_damage: Dict[WeaponAttackType, DamageRange] = field(default_factory=_empty_weapon_damage)

    def set_health_pools(self, value: int) -> None:
        self.create_health = value
        self.max_health = value
        self.health = value
        self.health_base_modifier = float(value)

    def damage_range(self, attack_type: WeaponAttackType) -> DamageRange:
        return self.weapon_damage.setdefault(attack_type, DamageRange())
