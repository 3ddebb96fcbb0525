from __future__ import annotations

import re
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, model_validator

from .settings import STAT_NAMES, MagicCountSettings

MetaValue = Union[str, bool]

_NOTE_TAG = re.compile(r"<([^<>:]+)(:?)([^>]*)>")


def parse_note_tags(note: str | None) -> Dict[str, MetaValue]:
    """Extract ``<key:value>`` and bare ``<key>`` tags from a note field."""
    meta: Dict[str, MetaValue] = {}
    if not note:
        return meta
    for key, colon, value in _NOTE_TAG.findall(note):
        meta[key] = value if colon else True
    return meta


def _blank_params() -> List[int]:
    return [0] * len(STAT_NAMES)


class _Annotated(BaseModel):
    note: str = ""
    meta: Dict[str, MetaValue] = {}

    @model_validator(mode="after")
    def _fill_meta(self):
        if not self.meta and self.note:
            self.meta = parse_note_tags(self.note)
        return self


class SkillRecord(_Annotated):
    id: int = Field(ge=1)
    name: str = Field(min_length=1)
    stype_id: int = Field(0, ge=0)
    mp_cost: int = Field(0, ge=0)


class Learning(BaseModel):
    level: int = Field(ge=1)
    skill_id: int = Field(ge=1)


class ClassRecord(_Annotated):
    id: int = Field(ge=1)
    name: str = Field(min_length=1)
    # Flat per-level increase of each base parameter.
    param_growth: List[int] = Field(default_factory=_blank_params)
    learnings: List[Learning] = []

    def skills_up_to(self, level: int) -> List[int]:
        return [l.skill_id for l in self.learnings if l.level <= level]


class ActorRecord(BaseModel):
    id: int = Field(ge=1)
    name: str = Field(min_length=1)
    class_id: int = Field(ge=1)
    level: int = Field(1, ge=1)
    max_level: int = Field(99, ge=1)
    # Base parameters at ``level``; equipment and states are not included.
    params: List[int] = Field(default_factory=_blank_params)
    skills: List[int] = []
    # Current MP at load; None starts the actor at full MP.
    mp: Optional[int] = Field(None, ge=0)


class EnemyRecord(BaseModel):
    id: int = Field(ge=1)
    name: str = Field(min_length=1)
    params: List[int] = Field(default_factory=_blank_params)
    skills: List[int] = []


class Database(BaseModel):
    classes: List[ClassRecord] = []
    skills: List[SkillRecord] = []
    actors: List[ActorRecord] = []
    enemies: List[EnemyRecord] = []
    party: List[int] = []
    settings: Optional[MagicCountSettings] = None

    def class_by_id(self, class_id: int) -> Optional[ClassRecord]:
        return next((c for c in self.classes if c.id == class_id), None)


__all__ = [
    "ActorRecord",
    "ClassRecord",
    "Database",
    "EnemyRecord",
    "Learning",
    "SkillRecord",
    "parse_note_tags",
]
