from __future__ import annotations

from typing import Mapping, Optional, Tuple

from spellcount.models.records import parse_note_tags
from spellcount.models.settings import MagicCountSettings
from spellcount.validation import ConfigurationError

from .protocols import ClassRepository, LearnableSkillHolder, SkillRepository

APTITUDE_KEYS = ("magicAptitude1", "magicAptitude2", "magicAptitude3")


def parse_aptitude(value: object, *, source: str = "record") -> Tuple[int, float]:
    """Parse a ``"<skill type id>,<multiplier>"`` annotation."""
    if not isinstance(value, str) or "," not in value:
        raise ConfigurationError(
            f"{source}: aptitude annotation must be '<skill type id>,<multiplier>', got {value!r}"
        )
    stype_raw, mult_raw = value.split(",", 1)
    try:
        return int(stype_raw.strip()), float(mult_raw.strip())
    except ValueError as e:
        raise ConfigurationError(f"{source}: bad aptitude annotation {value!r}") from e


def record_aptitude(meta: Mapping[str, object], stype_id: int, *, source: str = "record") -> float:
    """Product of every annotation slot on one record matching ``stype_id``."""
    aptitude = 1.0
    for key in APTITUDE_KEYS:
        value = meta.get(key)
        if value is None:
            continue
        meta_stype, multiplier = parse_aptitude(value, source=f"{source} {key}")
        # matching slots compound on the same record
        if meta_stype == stype_id:
            aptitude *= multiplier
    return aptitude


class AptitudeResolver:
    def __init__(
        self,
        settings: MagicCountSettings,
        classes: ClassRepository,
        skills: SkillRepository,
    ):
        self.settings = settings
        self.classes = classes
        self.skills = skills

    def class_aptitude(self, class_id: Optional[int], type_: int) -> float:
        if class_id is None:
            return 1.0
        job = self.classes.get_class(class_id)
        if job is None:
            raise ConfigurationError(f"Unknown class id {class_id}")
        return record_aptitude(
            job.meta, self.settings.skill_type_id(type_), source=f"class {class_id}"
        )

    def skill_aptitude(self, holder: LearnableSkillHolder, type_: int) -> float:
        stype_id = self.settings.skill_type_id(type_)
        aptitude = 1.0
        for skill_id in holder.skill_ids():
            skill = self.skills.get_skill(skill_id)
            if skill is None:
                raise ConfigurationError(f"Unknown skill id {skill_id}")
            aptitude *= record_aptitude(skill.meta, stype_id, source=f"skill {skill_id}")
        return aptitude

    def aptitude(self, user, type_: int) -> float:
        """Higher of the class and learned-skill multipliers for ``type_``."""
        return max(
            self.class_aptitude(user.class_id, type_),
            self.skill_aptitude(user, type_),
        )


__all__ = [
    "APTITUDE_KEYS",
    "AptitudeResolver",
    "parse_aptitude",
    "parse_note_tags",
    "record_aptitude",
]
