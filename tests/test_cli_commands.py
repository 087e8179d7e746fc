import pytest

from outdoor_scaling.data.repositories import ScalingConfigRepository, WorldRatesRepository
from outdoor_scaling.domain.defs import CreatureRank
from outdoor_scaling.domain.entities import Creature, CreatureStats
from outdoor_scaling.domain.scaling_models import OutdoorScalingConfig, PlacementFacts, ScalingOverride
from outdoor_scaling.presentation.cli import commands
from outdoor_scaling.services import OutdoorScalingService, ScalingConfigStore

ELWYNN = PlacementFacts(map_id=0, zone_id=12, is_continent=True, is_instanced=False, expansion=0,
                        map_name="Eastern Kingdoms")
SHADOWFANG = PlacementFacts(map_id=33, zone_id=209, is_continent=False, is_instanced=True, expansion=0,
                            map_name="Shadowfang Keep")


@pytest.fixture
def service(tmp_path) -> OutdoorScalingService:
    store = ScalingConfigStore(
        ScalingConfigRepository(base_path=tmp_path),
        initial=OutdoorScalingConfig(
            continent_health=(1.5, 1.0, 1.0),
            continent_damage=(1.25, 1.0, 1.0),
            creature_overrides={448: ScalingOverride(3.0, 2.0)},
        ),
    )
    return OutdoorScalingService(store, WorldRatesRepository(base_path=tmp_path))


def _hogger(placement: PlacementFacts) -> Creature:
    return Creature(
        guid=3,
        entry=448,
        name="Hogger",
        rank=CreatureRank.ELITE,
        placement=placement,
        stats=CreatureStats(create_health=666, max_health=666, health=666, health_base_modifier=666.0),
    )


def test_mapstat_reports_location(service: OutdoorScalingService) -> None:
    result = commands.dispatch(["os", "mapstat"], service, commands.CommandContext(placement=ELWYNN))
    assert result.ok and not result.sent_error
    assert result.lines[1] == "Eastern Kingdoms (Map 0), Zone 12"
    assert result.lines[-1] == "Active outdoor scaling: HP x1.50, Damage x1.25 (Continent default)"


def test_long_alias_and_case_are_accepted(service: OutdoorScalingService) -> None:
    result = commands.dispatch(["OutdoorScaling", "MapStat"], service, commands.CommandContext(placement=ELWYNN))
    assert result.ok


def test_creaturestat_requires_a_target(service: OutdoorScalingService) -> None:
    result = commands.dispatch(["os", "creaturestat"], service, commands.CommandContext(placement=ELWYNN))
    assert not result.ok
    assert result.sent_error
    assert result.lines == [commands.SELECT_CREATURE_MESSAGE]


def test_creaturestat_refuses_instanced_creatures(service: OutdoorScalingService) -> None:
    context = commands.CommandContext(placement=ELWYNN, selected_creature=_hogger(SHADOWFANG))
    result = commands.dispatch(["os", "creaturestat"], service, context)
    assert result.sent_error
    assert result.lines == [commands.INSTANCE_MESSAGE]


def test_creaturestat_reports_creature_override(service: OutdoorScalingService) -> None:
    hogger = _hogger(ELWYNN)
    context = commands.CommandContext(placement=SHADOWFANG, selected_creature=hogger)
    result = commands.dispatch(["os", "creaturestat"], service, context)
    assert result.ok
    assert result.lines[1] == "Hogger (Entry 448), Zone 12, Map 0"
    assert result.lines[4] == "Creature override: HP x3.00, Damage x2.00"
    assert service.inspection.last_result(hogger.guid).health_mult == 3.0


@pytest.mark.parametrize("tokens", [["os"], ["os", "zonestat"], ["scale", "mapstat"]])
def test_unknown_commands_return_usage(service: OutdoorScalingService, tokens) -> None:
    result = commands.dispatch(tokens, service, commands.CommandContext(placement=ELWYNN))
    assert result.sent_error
    assert result.lines == [commands.usage()]
