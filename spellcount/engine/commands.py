from __future__ import annotations

import shlex
from typing import List, Optional, Union

from spellcount.logging import get_logger

from .protocols import PartyRoster
from .system import MagicCountSystem

log = get_logger(__name__)

ALL = "all"
RecoverTarget = Union[int, str]

# Event scripts may use either spelling.
COMMAND_NAMES = {"MAGICRECOVER", "GR_MAGICRECOVER"}


class UnknownActorError(KeyError):
    pass


def parse_recover_target(arg: str) -> RecoverTarget:
    """``"All"`` (any case) or an actor id."""
    token = arg.strip()
    if token.lower() == ALL:
        return ALL
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"recover target must be an actor id or 'All', got {arg!r}") from None


def recover_magic(
    system: MagicCountSystem, roster: PartyRoster, target: RecoverTarget
) -> List[int]:
    """Fully recover one actor or every party member; returns the recovered ids."""
    if target == ALL:
        ids = roster.member_ids()
    else:
        ids = [int(target)]
    actors = []
    for actor_id in ids:
        actor = roster.actor(actor_id)
        if actor is None:
            raise UnknownActorError(actor_id)
        actors.append(actor)
    for actor in actors:
        system.full_recover(actor)
    log.info("recovered magic usage for actors %s", ids)
    return list(ids)


def run_plugin_command(
    line: str, system: MagicCountSystem, roster: PartyRoster
) -> Optional[List[int]]:
    """Run ``MagicRecover <id|All>``; returns None for any other command."""
    parts = shlex.split(line)
    if not parts or parts[0].upper() not in COMMAND_NAMES:
        return None
    if len(parts) < 2:
        raise ValueError(f"{parts[0]} requires an actor id or 'All'")
    return recover_magic(system, roster, parse_recover_target(parts[1]))


__all__ = [
    "ALL",
    "COMMAND_NAMES",
    "RecoverTarget",
    "UnknownActorError",
    "parse_recover_target",
    "recover_magic",
    "run_plugin_command",
]
