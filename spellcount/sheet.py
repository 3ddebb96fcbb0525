from __future__ import annotations

from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from spellcount.engine.coords import Coordinate
from spellcount.engine.formula import formula_table
from spellcount.engine.protocols import MagicUser
from spellcount.engine.system import MagicCountSystem
from spellcount.models.settings import MagicCountSettings


def _level_headers(settings: MagicCountSettings) -> List[str]:
    return [f"Lv{i}" for i in range(1, settings.max_level + 1)]


def usage_table(user: MagicUser, system: MagicCountSystem) -> Table:
    s = system.settings
    t = Table(title=None, expand=False)
    t.add_column("Type", style="bold")
    for h in _level_headers(s):
        t.add_column(h, justify="right")
    for type_ in range(s.spell_type_count):
        cells = []
        for lvl in range(1, s.max_level + 1):
            coord = Coordinate(type_, lvl)
            label = user.ledger.label(coord)
            if user.ledger.get_max(coord) and not user.ledger.has_uses(coord):
                label = f"[red]{label}[/]"
            cells.append(label)
        t.add_row(f"stype {s.skill_type_id(type_)}", *cells)
    return t


def formula_view(settings: MagicCountSettings, stat: float, aptitude: float = 1.0) -> Table:
    t = Table(box=None, expand=False)
    for h in _level_headers(settings):
        t.add_column(h, justify="right")
    t.add_row(*(str(v) for v in formula_table(settings, stat, aptitude, clamp=True)))
    return t


def render_console(user: MagicUser, system: MagicCountSystem, console: Console | None = None) -> None:
    console = console or Console()
    s = system.settings
    title = f"[bold]{user.name}[/]  base stat {s.base_stat_name}={user.param_base(s.base_stat_id)}"
    console.print(Panel(usage_table(user, system), title=title, expand=False))


def to_markdown(user: MagicUser, system: MagicCountSystem) -> str:
    s = system.settings
    headers = ["Type", *_level_headers(s)]
    lines = [
        f"# {user.name}",
        "",
        "| " + " | ".join(headers) + " |",
        "|" + "---|" * len(headers),
    ]
    for type_ in range(s.spell_type_count):
        cells = [user.ledger.label(Coordinate(type_, lvl)) for lvl in range(1, s.max_level + 1)]
        lines.append(f"| stype {s.skill_type_id(type_)} | " + " | ".join(cells) + " |")
    return "\n".join(lines) + "\n"


__all__ = ["formula_view", "render_console", "to_markdown", "usage_table"]
