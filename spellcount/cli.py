from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import typer
from rich.console import Console

from spellcount.config import load_settings
from spellcount.config_env import load_env
from spellcount.engine.battlers import ActorRoster
from spellcount.engine.commands import UnknownActorError, parse_recover_target, recover_magic
from spellcount.engine.ledger import PayResult
from spellcount.engine.repository import GameData
from spellcount.engine.system import MagicCountSystem
from spellcount.io.state_io import load_state, save_state
from spellcount.sheet import formula_view, render_console, to_markdown
from spellcount.validation import PrettyError, load_database

app = typer.Typer(no_args_is_help=True, help="Spell usage-count tools")


def _fail(msg: str) -> None:
    typer.secho(f"ERR: {msg}", fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


def _open(
    database: Path, config: Optional[Path], state: Optional[Path]
) -> Tuple[MagicCountSystem, ActorRoster]:
    db = load_database(database)
    settings = db.settings or load_settings(config)
    data = GameData(db)
    system = MagicCountSystem(settings, classes=data, skills=data)
    roster = ActorRoster(system, data)
    if state is not None and state.exists():
        load_state(state, roster)
    return system, roster


@app.command()
def formula(
    stat: float = typer.Option(..., help="Base statistic value"),
    aptitude: float = typer.Option(1.0, help="Aptitude multiplier"),
    config: Optional[Path] = typer.Option(None, help="Settings file (YAML/JSON)"),
):
    """Print the maximum usage count per level for a statistic value."""
    try:
        settings = load_settings(config)
    except PrettyError as e:
        _fail(str(e))
    Console().print(formula_view(settings, stat, aptitude))


@app.command()
def show(
    database: Path = typer.Argument(..., exists=True),
    actor: int = typer.Option(..., help="Actor id"),
    state: Optional[Path] = typer.Option(None, help="Saved ledger state"),
    config: Optional[Path] = typer.Option(None),
    markdown: bool = typer.Option(False, help="Print a Markdown table instead"),
):
    """Show an actor's current/maximum usage counts."""
    try:
        system, roster = _open(database, config, state)
    except PrettyError as e:
        _fail(str(e))
    member = roster.actor(actor)
    if member is None:
        _fail(f"unknown actor {actor}")
    if markdown:
        typer.echo(to_markdown(member, system), nl=False)
    else:
        render_console(member, system)


@app.command()
def cast(
    database: Path = typer.Argument(..., exists=True),
    actor: int = typer.Option(...),
    skill: int = typer.Option(..., help="Skill id"),
    state: Path = typer.Option(..., help="Ledger state file (created if missing)"),
    config: Optional[Path] = typer.Option(None),
):
    """Pay the cost of one skill use and save the ledger."""
    try:
        system, roster = _open(database, config, state)
    except PrettyError as e:
        _fail(str(e))
    member = roster.actor(actor)
    if member is None:
        _fail(f"unknown actor {actor}")
    if system.skills.get_skill(skill) is None:
        _fail(f"unknown skill {skill}")
    if not member.is_learned_skill(skill):
        _fail(f"{member.name} has not learned skill {skill}")
    if not system.can_pay_skill_cost(member, skill):
        _fail(f"{member.name} cannot pay for skill {skill}")
    result = system.pay_skill_cost(member, skill)
    save_state(state, roster)
    coord = system.coordinate_of(skill)
    if result is PayResult.OK and coord is not None:
        typer.echo(f"{member.name}: type {coord.type} level {coord.level} -> {member.ledger.label(coord)}")
    else:
        typer.echo(f"{member.name}: {result.value}")


@app.command()
def recover(
    database: Path = typer.Argument(..., exists=True),
    target: str = typer.Argument(..., help="Actor id or 'All' for the whole party"),
    state: Path = typer.Option(..., help="Ledger state file (created if missing)"),
    config: Optional[Path] = typer.Option(None),
):
    """Fully recover magic usage for one actor or the party."""
    try:
        system, roster = _open(database, config, state)
        ids = recover_magic(system, roster, parse_recover_target(target))
    except PrettyError as e:
        _fail(str(e))
    except UnknownActorError as e:
        _fail(f"unknown actor {e.args[0]}")
    except ValueError as e:
        _fail(str(e))
    save_state(state, roster)
    typer.secho(f"Recovered: {', '.join(str(i) for i in ids) or '-'}", fg=typer.colors.GREEN)


@app.command()
def validate(database: Path = typer.Argument(..., exists=True)):
    """Validate a database file, including aptitude annotations."""
    try:
        _, roster = _open(database, None, None)
        for actor_id in roster.data.actor_ids():
            roster.actor(actor_id)
    except PrettyError as e:
        typer.secho(f"ERR: {database}\n{e}", fg=typer.colors.RED)
        raise typer.Exit(1)
    typer.secho(f"OK: {database}", fg=typer.colors.GREEN)


def main() -> None:
    load_env()
    app()


if __name__ == "__main__":
    main()


__all__ = ["app", "main"]
