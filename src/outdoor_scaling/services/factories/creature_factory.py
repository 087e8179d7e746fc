"""Factory for spawning creatures from templates."""
from __future__ import annotations

from outdoor_scaling.data.repositories import CreatureTemplatesRepository, WorldRatesRepository
from outdoor_scaling.domain.entities import Creature, CreatureStats, DamageRange, WeaponAttackType
from outdoor_scaling.domain.scaling_models import PlacementFacts
from outdoor_scaling.services.errors import FactoryError


def create_creature_instance(
    entry: int,
    guid: int,
    placement: PlacementFacts | None,
    templates_repo: CreatureTemplatesRepository,
    world_rates_repo: WorldRatesRepository,
    *,
    is_pet: bool = False,
    is_guardian: bool = False,
) -> Creature:
    """Build a creature with the world base rates already applied, as the engine does at level selection."""
    try:
        template = templates_repo.get_template(entry)
    except KeyError as exc:
        raise FactoryError(f"Creature template {entry} not found.") from exc

    rates = world_rates_repo.rates_for_rank(template.rank)
    max_health = max(int(template.health * rates.health), 1)
    weapon_damage = {}
    for attack_type in WeaponAttackType:
        low, high = template.damage.get(attack_type, (0.0, 0.0))
        weapon_damage[attack_type] = DamageRange(min_damage=low * rates.damage, max_damage=high * rates.damage)

    stats = CreatureStats(
        create_health=max_health,
        max_health=max_health,
        health=max_health,
        health_base_modifier=float(max_health),
        weapon_damage=weapon_damage,
    )
    return Creature(
        guid=guid,
        entry=template.entry,
        name=template.name,
        rank=template.rank,
        placement=placement,
        stats=stats,
        is_pet=is_pet,
        is_guardian=is_guardian,
    )
