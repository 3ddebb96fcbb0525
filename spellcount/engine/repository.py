from __future__ import annotations

from typing import Dict, List, Optional

from spellcount.models.records import (
    ActorRecord,
    ClassRecord,
    Database,
    EnemyRecord,
    SkillRecord,
)


class GameData:
    """Read-only lookup tables over a loaded :class:`Database`."""

    def __init__(self, db: Database):
        self.db = db
        self._classes: Dict[int, ClassRecord] = {c.id: c for c in db.classes}
        self._skills: Dict[int, SkillRecord] = {s.id: s for s in db.skills}
        self._actors: Dict[int, ActorRecord] = {a.id: a for a in db.actors}
        self._enemies: Dict[int, EnemyRecord] = {e.id: e for e in db.enemies}

    def get_class(self, class_id: int) -> Optional[ClassRecord]:
        return self._classes.get(class_id)

    def get_skill(self, skill_id: int) -> Optional[SkillRecord]:
        return self._skills.get(skill_id)

    def get_actor(self, actor_id: int) -> Optional[ActorRecord]:
        return self._actors.get(actor_id)

    def get_enemy(self, enemy_id: int) -> Optional[EnemyRecord]:
        return self._enemies.get(enemy_id)

    def actor_ids(self) -> List[int]:
        return sorted(self._actors)

    @property
    def party(self) -> List[int]:
        return list(self.db.party)


__all__ = ["GameData"]
