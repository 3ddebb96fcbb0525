from __future__ import annotations

import math
from typing import List

from spellcount.models.settings import MagicCountSettings

# Per-level reduction applied after the stat term.
LEVEL_PENALTY = 1.6
STAT_BASE_RATE = 0.24
STAT_LEVEL_RATE = 0.01


def base_count(
    settings: MagicCountSettings, stat: float, level: int, aptitude: float = 1.0
) -> int:
    """Formula value before the learned/minimum/maximum clamps (never negative)."""
    raw = (
        stat * ((settings.coefficient - level) * STAT_LEVEL_RATE + STAT_BASE_RATE)
        + settings.bias
        - (level - 2) * LEVEL_PENALTY
    ) * aptitude
    return max(0, math.floor(raw))


def compute_maximum(
    settings: MagicCountSettings,
    stat: float,
    level: int,
    aptitude: float = 1.0,
    *,
    learned: bool = True,
) -> int:
    """Maximum usage count for one (type, level) coordinate.

    Unlearned levels are always 0; learned levels get at least
    ``minimum_count``. Both are capped at ``max_count``.
    """
    if not learned:
        return 0
    count = max(base_count(settings, stat, level, aptitude), settings.minimum_count)
    return min(count, settings.max_count)


def formula_table(
    settings: MagicCountSettings, stat: float, aptitude: float = 1.0, *, clamp: bool = False
) -> List[int]:
    """Formula values for every level; ``clamp`` applies only the ``max_count`` cap."""
    values = [base_count(settings, stat, lvl, aptitude) for lvl in range(1, settings.max_level + 1)]
    if clamp:
        values = [min(v, settings.max_count) for v in values]
    return values


__all__ = ["LEVEL_PENALTY", "base_count", "compute_maximum", "formula_table"]
