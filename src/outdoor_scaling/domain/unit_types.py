"""Enumerations shared by creature templates and runtime stats."""
from __future__ import annotations

from enum import Enum


class WeaponAttackType(Enum):
    """Weapon slots that carry a damage range."""

    MAIN_HAND = "main_hand"
    OFF_HAND = "off_hand"
    RANGED = "ranged"


class CreatureRank(Enum):
    """Template rank; selects which row of the world rate table applies."""

    NORMAL = "normal"
    ELITE = "elite"
    RARE_ELITE = "rare_elite"
    WORLD_BOSS = "world_boss"
    RARE = "rare"
