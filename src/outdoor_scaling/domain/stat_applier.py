"""Apply resolved outdoor multipliers to creature stats.

Creature stats arrive with the world-wide base rates already baked in. Each
helper divides the rate back out before multiplying by the outdoor factor, so
that the engine re-applying its rate later yields
``base * outdoor_mult * world_rate`` rather than losing either factor.
"""
from __future__ import annotations

from dataclasses import dataclass

from outdoor_scaling.domain.entities import CreatureStats, WeaponAttackType
from outdoor_scaling.domain.scaling_models import ScalingResult

# Single-precision machine epsilon; multipliers are configured as engine floats.
FLOAT_EPSILON = 1.1920929e-07


@dataclass(frozen=True, slots=True)
class BaseRates:
    """World-wide creature rates configured independently of outdoor scaling."""

    health: float = 1.0
    damage: float = 1.0
    spell_damage: float = 1.0


def safe_rate(rate: float) -> float:
    """Return ``rate``, or 1.0 when it is not strictly positive."""
    return rate if rate > 0.0 else 1.0


def is_neutral(mult: float) -> bool:
    return abs(mult - 1.0) < FLOAT_EPSILON


def apply_health_scaling(stats: CreatureStats, result: ScalingResult, rates: BaseRates) -> bool:
    """Rescale every health pool; returns True when the stats changed."""
    if not result.source.is_scaled or is_neutral(result.health_mult):
        return False
    base_health = stats.max_health / safe_rate(rates.health)
    new_max_health = max(int(base_health * result.health_mult), 1)
    stats.set_health_pools(new_max_health)
    return True


def apply_damage_scaling(stats: CreatureStats, damage_mult: float, rates: BaseRates) -> bool:
    """Rescale all six weapon damage bounds; returns True when the stats changed."""
    if is_neutral(damage_mult):
        return False
    damage_rate = safe_rate(rates.damage)
    for attack_type in WeaponAttackType:
        damage_range = stats.damage_range(attack_type)
        damage_range.min_damage = (damage_range.min_damage / damage_rate) * damage_mult
        damage_range.max_damage = (damage_range.max_damage / damage_rate) * damage_mult
    return True


def apply_scaling(stats: CreatureStats, result: ScalingResult, rates: BaseRates) -> bool:
    """Apply health then damage scaling for a scaled source."""
    if not result.source.is_scaled:
        return False
    health_changed = apply_health_scaling(stats, result, rates)
    damage_changed = apply_damage_scaling(stats, result.damage_mult, rates)
    return health_changed or damage_changed


def scale_spell_damage(damage: int, result: ScalingResult, rates: BaseRates) -> int:
    """Return the spell damage an outdoor creature deals after scaling."""
    if damage == 0 or not result.source.is_scaled or is_neutral(result.damage_mult):
        return damage
    normalized = damage / safe_rate(rates.spell_damage)
    # int() truncates toward zero, like the engine's integer damage field.
    scaled = int(normalized * result.damage_mult)
    if scaled == 0:
        scaled = 1 if result.damage_mult > 0.0 else 0
    return scaled
