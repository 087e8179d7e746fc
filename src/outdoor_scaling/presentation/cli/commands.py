"""Chat command table for outdoor scaling diagnostics."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Sequence

from outdoor_scaling.domain.entities import Creature
from outdoor_scaling.domain.scaling_models import PlacementFacts
from outdoor_scaling.services import OutdoorScalingService

SELECT_CREATURE_MESSAGE = "Please select a creature."
INSTANCE_MESSAGE = "Outdoor scaling not active inside instances."


@dataclass(slots=True)
class CommandContext:
    """What a command handler can see about the invoking player."""

    placement: PlacementFacts
    selected_creature: Creature | None = None


@dataclass(slots=True)
class CommandResult:
    """Messages produced by a command and whether it failed."""

    lines: List[str] = field(default_factory=list)
    ok: bool = True
    sent_error: bool = False

    @classmethod
    def error(cls, message: str) -> "CommandResult":
        return cls(lines=[message], ok=False, sent_error=True)


CommandHandler = Callable[[OutdoorScalingService, CommandContext], CommandResult]


def handle_map_stat(service: OutdoorScalingService, context: CommandContext) -> CommandResult:
    return CommandResult(lines=service.map_report(context.placement))


def handle_creature_stat(service: OutdoorScalingService, context: CommandContext) -> CommandResult:
    creature = context.selected_creature
    if creature is None:
        return CommandResult.error(SELECT_CREATURE_MESSAGE)
    if creature.placement is not None and creature.placement.is_instanced:
        return CommandResult.error(INSTANCE_MESSAGE)
    return CommandResult(lines=service.creature_report(creature))


SUBCOMMANDS: Dict[str, CommandHandler] = {
    "mapstat": handle_map_stat,
    "creaturestat": handle_creature_stat,
}
ROOT_COMMANDS = ("outdoorscaling", "os")


def is_scaling_command(tokens: Sequence[str]) -> bool:
    return bool(tokens) and tokens[0].lower() in ROOT_COMMANDS


def usage() -> str:
    return f"Usage: {'|'.join(ROOT_COMMANDS)} <{'|'.join(SUBCOMMANDS)}>"


def dispatch(
    tokens: Sequence[str],
    service: OutdoorScalingService,
    context: CommandContext,
) -> CommandResult:
    """Run ``os <subcommand>``; unknown input returns usage text flagged as an error."""
    if not is_scaling_command(tokens) or len(tokens) < 2:
        return CommandResult.error(usage())
    handler = SUBCOMMANDS.get(tokens[1].lower())
    if handler is None:
        return CommandResult.error(usage())
    return handler(service, context)
