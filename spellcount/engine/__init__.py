from .coords import Coordinate, SkillCoordinates
from .formula import base_count, compute_maximum, formula_table
from .ledger import PayResult, UsageLedger
from .system import MagicCountSystem

__all__ = [
    "Coordinate",
    "MagicCountSystem",
    "PayResult",
    "SkillCoordinates",
    "UsageLedger",
    "base_count",
    "compute_maximum",
    "formula_table",
]
