from __future__ import annotations

from typing import NamedTuple, Optional

from spellcount.models.settings import MagicCountSettings


class Coordinate(NamedTuple):
    type: int  # 0-based family index
    level: int  # 1-based spell level

    @property
    def cell(self) -> tuple[int, int]:
        """Ledger table index, both 0-based."""
        return self.type, self.level - 1


class SkillCoordinates:
    """Classify skill ids and skill-type ids into (family, level) coordinates.

    Family ``t`` owns ``spells_per_level * max_level`` consecutive skill ids
    starting at ``start_id + t * (spells_per_level * max_level + 1)``; the id
    after each family is a gap. Skill types are consecutive from
    ``skill_type_base``.
    """

    def __init__(self, settings: MagicCountSettings):
        self.settings = settings

    # --- Types ---
    def type_of_stype(self, stype_id: int) -> Optional[int]:
        s = self.settings
        if s.skill_type_base <= stype_id < s.skill_type_base + s.spell_type_count:
            return stype_id - s.skill_type_base
        return None

    def is_managed_stype(self, stype_id: int) -> bool:
        return self.type_of_stype(stype_id) is not None

    def type_of_skill(self, skill_id: int, stype_id: int) -> Optional[int]:
        """Type from the skill's declared skill type; the id is not checked."""
        return self.type_of_stype(stype_id)

    def family_of(self, skill_id: int) -> Optional[int]:
        """Type from the id's position alone; None in gaps and outside families."""
        s = self.settings
        offset = skill_id - s.start_id
        if offset < 0:
            return None
        type_, pos = divmod(offset, s.family_span)
        if type_ >= s.spell_type_count or pos >= s.family_size:
            return None
        return type_

    # --- Levels ---
    def level_of(self, skill_id: int, stype_id: Optional[int] = None) -> Optional[int]:
        if stype_id is None:
            type_ = self.family_of(skill_id)
        else:
            type_ = self.type_of_skill(skill_id, stype_id)
        if type_ is None:
            return None
        s = self.settings
        level = (skill_id - s.start_id - s.family_span * type_) // s.spells_per_level + 1
        if not 1 <= level <= s.max_level:
            return None
        return level

    def coordinate_of(
        self, skill_id: int, stype_id: Optional[int] = None
    ) -> Optional[Coordinate]:
        if stype_id is None:
            type_ = self.family_of(skill_id)
        else:
            type_ = self.type_of_skill(skill_id, stype_id)
        if type_ is None:
            return None
        level = self.level_of(skill_id, stype_id)
        if level is None:
            return None
        return Coordinate(type_, level)

    def skill_ids_at(self, type_: int, level: int) -> range:
        s = self.settings
        first = s.family_start(type_) + (level - 1) * s.spells_per_level
        return range(first, first + s.spells_per_level)

    def family_ids(self, type_: int) -> range:
        first = self.settings.family_start(type_)
        return range(first, first + self.settings.family_size)


__all__ = ["Coordinate", "SkillCoordinates"]
