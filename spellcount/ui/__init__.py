from .selection import (
    CountRow,
    Focus,
    SelectionContext,
    SelectionMode,
    SkillSelectionController,
)

__all__ = [
    "CountRow",
    "Focus",
    "SelectionContext",
    "SelectionMode",
    "SkillSelectionController",
]
