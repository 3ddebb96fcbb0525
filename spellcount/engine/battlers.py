from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from spellcount.models.records import ActorRecord, ClassRecord, EnemyRecord
from spellcount.models.settings import STAT_NAMES

from .ledger import UsageLedger
from .protocols import SkillLike
from .repository import GameData
from .system import MagicCountSystem

MMP = STAT_NAMES.index("mmp")


@dataclass
class Battler:
    name: str
    ledger: UsageLedger
    params: List[int] = field(default_factory=lambda: [0] * len(STAT_NAMES))
    skills: List[int] = field(default_factory=list)
    mp: Optional[int] = None

    def __post_init__(self) -> None:
        if self.mp is None:
            self.mp = self.param_base(MMP)

    @property
    def class_id(self) -> Optional[int]:
        return None

    def param_base(self, param_id: int) -> int:
        return self.params[param_id]

    def is_learned_skill(self, skill_id: int) -> bool:
        return skill_id in self.skills

    def skill_ids(self) -> List[int]:
        return list(self.skills)

    def learn_skill(self, skill_id: int) -> None:
        if skill_id not in self.skills:
            self.skills.append(skill_id)
            self.skills.sort()

    def can_pay_host_cost(self, skill: SkillLike) -> bool:
        return (self.mp or 0) >= getattr(skill, "mp_cost", 0)

    def pay_host_cost(self, skill: SkillLike) -> None:
        self.mp = (self.mp or 0) - getattr(skill, "mp_cost", 0)


@dataclass
class Actor(Battler):
    actor_id: int = 0
    job: Optional[ClassRecord] = None
    level: int = 1
    max_level: int = 99

    @property
    def class_id(self) -> Optional[int]:
        return self.job.id if self.job else None

    def gain_level(self) -> bool:
        """Raise level by one, apply class growth and learn the class's skills."""
        if self.level >= self.max_level:
            return False
        self.level += 1
        if self.job:
            self.params = [p + g for p, g in zip(self.params, self.job.param_growth)]
            for skill_id in self.job.skills_up_to(self.level):
                self.learn_skill(skill_id)
        return True


@dataclass
class Enemy(Battler):
    enemy_id: int = 0


def build_actor(record: ActorRecord, data: GameData, ledger: UsageLedger) -> Actor:
    job = data.get_class(record.class_id)
    skills = set(record.skills)
    if job:
        skills.update(job.skills_up_to(record.level))
    return Actor(
        name=record.name,
        ledger=ledger,
        params=list(record.params),
        skills=sorted(skills),
        mp=record.mp,
        actor_id=record.id,
        job=job,
        level=record.level,
        max_level=record.max_level,
    )


def build_enemy(record: EnemyRecord, ledger: UsageLedger) -> Enemy:
    return Enemy(
        name=record.name,
        ledger=ledger,
        params=list(record.params),
        skills=sorted(set(record.skills)),
        enemy_id=record.id,
    )


class ActorRoster:
    """Lazily set-up actors plus the active party, the way a host keeps them."""

    def __init__(self, system: MagicCountSystem, data: GameData, party: Optional[List[int]] = None):
        self.system = system
        self.data = data
        self.party: List[int] = list(data.party if party is None else party)
        self._actors: Dict[int, Actor] = {}

    def actor(self, actor_id: int) -> Optional[Actor]:
        if actor_id in self._actors:
            return self._actors[actor_id]
        record = self.data.get_actor(actor_id)
        if record is None:
            return None
        actor = build_actor(record, self.data, self.system.new_ledger())
        self.system.setup_actor(actor)
        self._actors[actor_id] = actor
        return actor

    def member_ids(self) -> List[int]:
        return list(self.party)

    def members(self) -> List[Actor]:
        return [a for a in (self.actor(i) for i in self.party) if a is not None]

    def loaded(self) -> Dict[int, Actor]:
        return dict(self._actors)

    def enemy(self, enemy_id: int) -> Optional[Enemy]:
        record = self.data.get_enemy(enemy_id)
        if record is None:
            return None
        enemy = build_enemy(record, self.system.new_ledger())
        self.system.setup_enemy(enemy)
        return enemy


__all__ = ["Actor", "ActorRoster", "Battler", "Enemy", "build_actor", "build_enemy"]
