"""Console host for exercising outdoor scaling by hand."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

from outdoor_scaling.data.repositories import (
    CreatureTemplatesRepository,
    MapsRepository,
    ScalingConfigRepository,
    WorldRatesRepository,
)
from outdoor_scaling.domain.entities import Creature, WeaponAttackType
from outdoor_scaling.domain.state import WorldState
from outdoor_scaling.presentation.cli import commands
from outdoor_scaling.services import (
    FactoryError,
    InspectionService,
    OutdoorScalingService,
    ScalingConfigStore,
)
from outdoor_scaling.services.factories import create_creature_instance

logger = logging.getLogger(__name__)

DEBUG_ENV = "OS_DEBUG"
_START_MAP_ID = 0
_START_ZONE_ID = 12


@dataclass
class ConsoleSession:
    """Everything one console run needs."""

    service: OutdoorScalingService
    maps_repo: MapsRepository
    templates_repo: CreatureTemplatesRepository
    world_rates_repo: WorldRatesRepository
    state: WorldState


def main() -> None:
    """Start the interactive console."""
    _configure_logging()
    session = build_session()
    print("=== Outdoor Scaling Console ===")
    print("Type 'help' for commands.")
    running = True
    while running:
        try:
            line = input("> ")
        except EOFError:
            break
        lines, running = handle_line(session, line)
        for message in lines:
            print(message)
    print("Goodbye!")


def _configure_logging() -> None:
    level = logging.DEBUG if os.getenv(DEBUG_ENV) == "1" else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def build_session(base_path=None) -> ConsoleSession:
    """Construct the service and repositories and load the scaling config."""
    config_store = ScalingConfigStore(ScalingConfigRepository(base_path))
    world_rates_repo = WorldRatesRepository(base_path)
    service = OutdoorScalingService(
        config_store=config_store,
        world_rates_repo=world_rates_repo,
        inspection=InspectionService(),
    )
    service.on_config_load()
    maps_repo = MapsRepository(base_path)
    start = maps_repo.get_map(_START_MAP_ID).placement(_START_ZONE_ID)
    return ConsoleSession(
        service=service,
        maps_repo=maps_repo,
        templates_repo=CreatureTemplatesRepository(base_path),
        world_rates_repo=world_rates_repo,
        state=WorldState(player_placement=start),
    )


def handle_line(session: ConsoleSession, line: str) -> Tuple[List[str], bool]:
    """Run one console line; returns the output lines and whether to keep going."""
    tokens = line.split()
    if not tokens:
        return [], True
    name = tokens[0].lower()
    if name in ("quit", "exit"):
        return [], False
    if commands.is_scaling_command(tokens):
        context = commands.CommandContext(
            placement=session.state.player_placement,
            selected_creature=session.state.selected_creature(),
        )
        return commands.dispatch(tokens, session.service, context).lines, True
    handler = _CONSOLE_COMMANDS.get(name)
    if handler is None:
        return [f"Unknown command '{tokens[0]}'. Type 'help' for commands."], True
    return handler(session, tokens[1:]), True


def _cmd_help(session: ConsoleSession, args: Sequence[str]) -> List[str]:
    return [
        "where                      - show your map and zone",
        "goto <map> <zone>          - move to a map and zone",
        "spawn <entry> [pet|guardian] - spawn a creature next to you",
        "list                       - list spawned creatures",
        "despawn <guid>             - remove a spawned creature",
        "target <guid>              - select a creature",
        "stats                      - show the selected creature's stats",
        "spell <damage>             - the selected creature casts at you",
        "reload                     - reload outdoor_scaling.json",
        commands.usage(),
        "quit",
    ]


def _cmd_where(session: ConsoleSession, args: Sequence[str]) -> List[str]:
    placement = session.state.player_placement
    return [f"{placement.map_name} (Map {placement.map_id}), Zone {placement.zone_id}"]


def _cmd_goto(session: ConsoleSession, args: Sequence[str]) -> List[str]:
    if len(args) != 2 or not all(arg.isdigit() for arg in args):
        return ["Usage: goto <map> <zone>"]
    map_id, zone_id = int(args[0]), int(args[1])
    try:
        map_def = session.maps_repo.get_map(map_id)
    except KeyError:
        return [f"Unknown map {map_id}."]
    session.state.player_placement = map_def.placement(zone_id)
    return _cmd_where(session, ())


def _cmd_spawn(session: ConsoleSession, args: Sequence[str]) -> List[str]:
    if not args or not args[0].isdigit() or len(args) > 2:
        return ["Usage: spawn <entry> [pet|guardian]"]
    flag = args[1].lower() if len(args) == 2 else ""
    if flag not in ("", "pet", "guardian"):
        return ["Usage: spawn <entry> [pet|guardian]"]
    state = session.state
    try:
        creature = create_creature_instance(
            int(args[0]),
            state.allocate_guid(),
            state.player_placement,
            session.templates_repo,
            session.world_rates_repo,
            is_pet=flag == "pet",
            is_guardian=flag == "guardian",
        )
    except FactoryError as exc:
        return [str(exc)]
    result = session.service.on_creature_select_level(creature)
    state.creatures[creature.guid] = creature
    state.selected_guid = creature.guid
    return [
        f"Spawned {creature.name} (guid {creature.guid}) - {result.source.label}.",
        *_format_stats(creature),
    ]


def _cmd_list(session: ConsoleSession, args: Sequence[str]) -> List[str]:
    if not session.state.creatures:
        return ["No creatures spawned."]
    lines = []
    for guid in sorted(session.state.creatures):
        creature = session.state.creatures[guid]
        marker = "*" if guid == session.state.selected_guid else " "
        lines.append(f"{marker} {guid}: {creature.name} (Entry {creature.entry}) HP {creature.stats.max_health}")
    return lines


def _cmd_target(session: ConsoleSession, args: Sequence[str]) -> List[str]:
    if len(args) != 1 or not args[0].isdigit():
        return ["Usage: target <guid>"]
    guid = int(args[0])
    creature = session.state.creatures.get(guid)
    if creature is None:
        return [f"No creature with guid {guid}."]
    session.state.selected_guid = guid
    return [f"Selected {creature.name} (guid {guid})."]


def _cmd_despawn(session: ConsoleSession, args: Sequence[str]) -> List[str]:
    if len(args) != 1 or not args[0].isdigit():
        return ["Usage: despawn <guid>"]
    guid = int(args[0])
    creature = session.state.creatures.pop(guid, None)
    if creature is None:
        return [f"No creature with guid {guid}."]
    session.service.on_creature_removed(creature)
    if session.state.selected_guid == guid:
        session.state.selected_guid = None
    return [f"Despawned {creature.name} (guid {guid})."]


def _cmd_stats(session: ConsoleSession, args: Sequence[str]) -> List[str]:
    creature = session.state.selected_creature()
    if creature is None:
        return [commands.SELECT_CREATURE_MESSAGE]
    return _format_stats(creature)


def _cmd_spell(session: ConsoleSession, args: Sequence[str]) -> List[str]:
    if len(args) != 1 or not args[0].lstrip("-").isdigit():
        return ["Usage: spell <damage>"]
    creature = session.state.selected_creature()
    if creature is None:
        return [commands.SELECT_CREATURE_MESSAGE]
    incoming = int(args[0])
    dealt = session.service.modify_spell_damage_taken(None, creature, incoming)
    return [f"{creature.name} hits you for {dealt} (base {incoming})."]


def _cmd_reload(session: ConsoleSession, args: Sequence[str]) -> List[str]:
    if session.service.on_config_load(reload=True):
        return ["Outdoor scaling config reloaded."]
    return ["Reload failed; previous config kept."]


def _format_stats(creature: Creature) -> List[str]:
    stats = creature.stats
    lines = [f"  Health {stats.health}/{stats.max_health}"]
    for attack_type in WeaponAttackType:
        damage = stats.damage_range(attack_type)
        if damage.max_damage > 0:
            lines.append(f"  {attack_type.value}: {damage.min_damage:.1f}-{damage.max_damage:.1f}")
    return lines


ConsoleHandler = Callable[[ConsoleSession, Sequence[str]], List[str]]

_CONSOLE_COMMANDS: Dict[str, ConsoleHandler] = {
    "help": _cmd_help,
    "where": _cmd_where,
    "goto": _cmd_goto,
    "spawn": _cmd_spawn,
    "list": _cmd_list,
    "target": _cmd_target,
    "despawn": _cmd_despawn,
    "stats": _cmd_stats,
    "spell": _cmd_spell,
    "reload": _cmd_reload,
}
