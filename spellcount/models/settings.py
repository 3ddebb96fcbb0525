from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

# Base parameter ids as the host numbers them.
STAT_NAMES: Tuple[str, ...] = (
    "mhp",  # 0 max HP
    "mmp",  # 1 max MP
    "atk",  # 2 attack
    "def",  # 3 defense
    "mat",  # 4 magic attack
    "mdf",  # 5 magic defense
    "agi",  # 6 agility
    "luk",  # 7 luck
)


class MagicCountSettings(BaseModel):
    """Process-wide numbering scheme and formula constants.

    Field names are snake_case; the camelCase aliases match the names the
    settings carry in game data files.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    start_id: int = Field(10, ge=1, alias="startId")
    skill_type_base: int = Field(1, ge=1, alias="skillTypeBase")
    spell_type_count: int = Field(3, ge=1, alias="spellTypeCount")
    spells_per_level: int = Field(3, ge=1, le=8, alias="spellsPerLevel")
    max_level: int = Field(7, ge=3, le=9, alias="maxLevel")
    minimum_count: int = Field(3, ge=1, le=99, alias="minimumCount")
    max_count: int = Field(9, ge=1, le=99, alias="maxCount")
    base_stat_id: int = Field(4, ge=0, le=7, alias="baseStatId")
    coefficient: float = Field(5.0, ge=0, le=10)
    bias: float = Field(0.0, ge=-10, le=10)

    # --- Derived ---
    @property
    def family_span(self) -> int:
        """Identifiers per family including the reserved gap slot."""
        return self.spells_per_level * self.max_level + 1

    @property
    def family_size(self) -> int:
        return self.spells_per_level * self.max_level

    @property
    def base_stat_name(self) -> str:
        return STAT_NAMES[self.base_stat_id]

    def family_start(self, type_: int) -> int:
        return self.start_id + type_ * self.family_span

    def skill_type_id(self, type_: int) -> int:
        return self.skill_type_base + type_


DEFAULT_SETTINGS = MagicCountSettings()

__all__ = ["MagicCountSettings", "DEFAULT_SETTINGS", "STAT_NAMES"]
