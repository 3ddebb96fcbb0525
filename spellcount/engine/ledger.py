from __future__ import annotations

from enum import Enum
from typing import List

from spellcount.models.settings import MagicCountSettings

from .coords import Coordinate

Table = List[List[int]]


class PayResult(str, Enum):
    OK = "ok"
    INSUFFICIENT_USES = "insufficient_uses"
    UNMANAGED = "unmanaged"


def _zeros(types: int, levels: int) -> Table:
    return [[0] * levels for _ in range(types)]


class UsageLedger:
    """Current and maximum usage counts per (type, level), owned by one battler."""

    def __init__(self, types: int, levels: int):
        self.types = types
        self.levels = levels
        self.current: Table = _zeros(types, levels)
        self.maximum: Table = _zeros(types, levels)

    @classmethod
    def for_settings(cls, settings: MagicCountSettings) -> "UsageLedger":
        return cls(settings.spell_type_count, settings.max_level)

    # --- Reads ---
    def get(self, coord: Coordinate) -> int:
        t, l = coord.cell
        return self.current[t][l]

    def get_max(self, coord: Coordinate) -> int:
        t, l = coord.cell
        return self.maximum[t][l]

    def has_uses(self, coord: Coordinate) -> bool:
        return self.get(coord) > 0

    def label(self, coord: Coordinate) -> str:
        return f"{self.get(coord)}/{self.get_max(coord)}"

    # --- Mutations ---
    def set_maximum_row(self, type_: int, values: List[int]) -> None:
        if len(values) != self.levels:
            raise ValueError(f"expected {self.levels} values, got {len(values)}")
        self.maximum[type_] = list(values)
        # a lowered maximum pulls the current count down with it
        self.current[type_] = [min(c, m) for c, m in zip(self.current[type_], values)]

    def clear_type(self, type_: int) -> None:
        self.set_maximum_row(type_, [0] * self.levels)

    def fill_maximum(self, value: int) -> None:
        for type_ in range(self.types):
            self.set_maximum_row(type_, [value] * self.levels)

    def full_recover(self) -> None:
        self.current = [list(row) for row in self.maximum]

    def consume(self, coord: Coordinate) -> PayResult:
        t, l = coord.cell
        if self.current[t][l] <= 0:
            return PayResult.INSUFFICIENT_USES
        self.current[t][l] -= 1
        return PayResult.OK

    # --- Persistence ---
    def snapshot(self) -> dict:
        return {
            "current": [list(row) for row in self.current],
            "maximum": [list(row) for row in self.maximum],
        }

    def restore(self, data: dict) -> None:
        """Replace both tables; rejects wrong shapes and counts outside ``0..maximum``."""
        tables = {}
        for name in ("current", "maximum"):
            table = data.get(name)
            if (
                not isinstance(table, list)
                or len(table) != self.types
                or any(not isinstance(row, list) or len(row) != self.levels for row in table)
            ):
                raise ValueError(f"{name} table must be {self.types}x{self.levels}")
            try:
                tables[name] = [[int(v) for v in row] for row in table]
            except (TypeError, ValueError):
                raise ValueError(f"{name} table must hold integers") from None
        current, maximum = tables["current"], tables["maximum"]
        for t in range(self.types):
            for l in range(self.levels):
                if maximum[t][l] < 0:
                    raise ValueError(f"maximum[{t}][{l}] is negative")
                if not 0 <= current[t][l] <= maximum[t][l]:
                    raise ValueError(
                        f"current[{t}][{l}]={current[t][l]} outside 0..{maximum[t][l]}"
                    )
        self.current = current
        self.maximum = maximum


__all__ = ["PayResult", "Table", "UsageLedger"]
