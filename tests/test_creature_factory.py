import pytest

from outdoor_scaling.data.repositories import CreatureTemplatesRepository, WorldRatesRepository
from outdoor_scaling.domain.entities import DamageRange, WeaponAttackType
from outdoor_scaling.domain.scaling_models import PlacementFacts
from outdoor_scaling.services import FactoryError
from outdoor_scaling.services.factories import create_creature_instance

NORTHREND = PlacementFacts(map_id=571, zone_id=495, is_continent=True, is_instanced=False, expansion=2)


def test_factory_applies_world_rates_for_rank() -> None:
    creature = create_creature_instance(
        448, 10, NORTHREND, CreatureTemplatesRepository(), WorldRatesRepository()
    )
    assert creature.guid == 10
    assert creature.name == "Hogger"
    assert creature.stats.max_health == 1332
    assert creature.stats.health_base_modifier == 1332.0
    assert creature.stats.damage_range(WeaponAttackType.MAIN_HAND) == DamageRange(30.0, 42.0)
    assert creature.stats.damage_range(WeaponAttackType.OFF_HAND) == DamageRange(0.0, 0.0)


def test_factory_flags_pets_and_guardians() -> None:
    templates, rates = CreatureTemplatesRepository(), WorldRatesRepository()
    assert create_creature_instance(416, 1, NORTHREND, templates, rates, is_pet=True).is_pet_or_guardian
    assert create_creature_instance(416, 2, NORTHREND, templates, rates, is_guardian=True).is_pet_or_guardian
    assert not create_creature_instance(416, 3, NORTHREND, templates, rates).is_pet_or_guardian


def test_factory_unknown_entry_raises() -> None:
    with pytest.raises(FactoryError):
        create_creature_instance(1, 1, NORTHREND, CreatureTemplatesRepository(), WorldRatesRepository())
