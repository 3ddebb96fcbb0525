from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

import yaml

from spellcount.engine.battlers import Actor, ActorRoster
from spellcount.validation import ConfigurationError, read_payload


def dump_state(roster: ActorRoster) -> Dict[str, Any]:
    """Ledger tables of every loaded actor, keyed by actor id."""
    return {
        "party": roster.member_ids(),
        "actors": {
            str(actor_id): actor.ledger.snapshot()
            for actor_id, actor in sorted(roster.loaded().items())
        },
    }


def _party_ids(raw: Any) -> List[int]:
    if not isinstance(raw, list):
        raise ConfigurationError("State 'party' must be a list of actor ids")
    try:
        return [int(i) for i in raw]
    except (TypeError, ValueError):
        raise ConfigurationError(f"State 'party' must be a list of actor ids, got {raw!r}") from None


def _resolve_actors(roster: ActorRoster, raw: Any) -> List[Tuple[Actor, Mapping[str, Any]]]:
    if not isinstance(raw, dict):
        raise ConfigurationError("State 'actors' must map actor ids to tables")
    pairs = []
    for key, tables in raw.items():
        try:
            actor_id = int(key)
        except (TypeError, ValueError):
            raise ConfigurationError(f"State actor key {key!r} is not an id") from None
        actor = roster.actor(actor_id)
        if actor is None:
            raise ConfigurationError(f"State references unknown actor {key}")
        if not isinstance(tables, dict):
            raise ConfigurationError(f"State for actor {key} must be an object")
        pairs.append((actor, tables))
    return pairs


def apply_state(roster: ActorRoster, state: Mapping[str, Any]) -> None:
    """Restore saved tables onto the roster; nothing changes if any entry is bad."""
    party = _party_ids(state["party"]) if "party" in state else None
    pairs = _resolve_actors(roster, state.get("actors") or {})
    backups = [(actor, actor.ledger.snapshot()) for actor, _ in pairs]
    try:
        for actor, tables in pairs:
            actor.ledger.restore(tables)
    except ValueError as e:
        bad = actor.name
        for actor, snap in backups:
            actor.ledger.restore(snap)
        raise ConfigurationError(f"State for {bad} is invalid: {e}") from e
    if party is not None:
        roster.party = party


def save_state(path: Path, roster: ActorRoster) -> None:
    data = dump_state(roster)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() in {".yaml", ".yml"}:
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    else:
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def load_state(path: Path, roster: ActorRoster) -> None:
    data = read_payload(path)
    if data is None:
        return
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: state file must contain an object at the top level")
    apply_state(roster, data)


__all__ = ["apply_state", "dump_state", "load_state", "save_state"]
