from __future__ import annotations

from typing import Iterable, List, Optional, Union

from spellcount.logging import get_logger
from spellcount.models.settings import MagicCountSettings

from .aptitude import AptitudeResolver
from .coords import Coordinate, SkillCoordinates
from .formula import compute_maximum
from .ledger import PayResult, UsageLedger
from .protocols import ClassRepository, MagicUser, SkillLike, SkillRepository

log = get_logger(__name__)

SkillRef = Union[SkillLike, int]


class MagicCountSystem:
    """Usage-count accounting for skills in the configured spell families.

    Skills outside the families are left to the host's own MP/TP costs.
    """

    def __init__(
        self,
        settings: MagicCountSettings,
        classes: ClassRepository,
        skills: SkillRepository,
    ):
        self.settings = settings
        self.skills = skills
        self.coords = SkillCoordinates(settings)
        self.aptitudes = AptitudeResolver(settings, classes, skills)

    def new_ledger(self) -> UsageLedger:
        return UsageLedger.for_settings(self.settings)

    # --- Classification ---
    def _record(self, skill: SkillRef) -> Optional[SkillLike]:
        if isinstance(skill, int):
            return self.skills.get_skill(skill)
        return skill

    def coordinate_of(self, skill: SkillRef) -> Optional[Coordinate]:
        record = self._record(skill)
        if record is None:
            # no record to read a declared type from; fall back to the id position
            return self.coords.coordinate_of(skill) if isinstance(skill, int) else None
        return self.coords.coordinate_of(record.id, record.stype_id)

    def is_learned_level(self, user: MagicUser, type_: int, level: int) -> bool:
        return any(user.is_learned_skill(i) for i in self.coords.skill_ids_at(type_, level))

    def is_learned_type(self, user: MagicUser, type_: int) -> bool:
        return any(
            self.is_learned_level(user, type_, lvl)
            for lvl in range(1, self.settings.max_level + 1)
        )

    # --- Maxima ---
    def max_counts_for(self, user: MagicUser, type_: int) -> List[int]:
        s = self.settings
        if not self.is_learned_type(user, type_):
            return [0] * s.max_level
        aptitude = self.aptitudes.aptitude(user, type_)
        stat = user.param_base(s.base_stat_id)
        return [
            compute_maximum(
                s, stat, lvl, aptitude, learned=self.is_learned_level(user, type_, lvl)
            )
            for lvl in range(1, s.max_level + 1)
        ]

    def recompute_all(self, user: MagicUser) -> None:
        for type_ in range(self.settings.spell_type_count):
            user.ledger.set_maximum_row(type_, self.max_counts_for(user, type_))
        log.debug("recomputed usage maxima for %s: %s", user.name, user.ledger.maximum)

    def full_recover(self, user: MagicUser) -> None:
        user.ledger.full_recover()

    # --- Lifecycle ---
    def setup_actor(self, actor: MagicUser) -> None:
        self.recompute_all(actor)
        self.full_recover(actor)

    def setup_enemy(self, enemy: MagicUser) -> None:
        enemy.ledger.fill_maximum(self.settings.max_count)
        self.full_recover(enemy)

    def level_up(self, actor) -> None:
        """Advance the actor one level, then recompute maxima.

        Current counts are left alone; they are refilled by a full recovery.
        """
        actor.gain_level()
        self.recompute_all(actor)

    # --- Costs ---
    def can_afford(self, user: MagicUser, skill: SkillRef) -> bool:
        coord = self.coordinate_of(skill)
        if coord is None:
            record = self._record(skill)
            return record is not None and user.can_pay_host_cost(record)
        return user.ledger.has_uses(coord)

    def can_pay_skill_cost(self, user: MagicUser, skill: SkillRef) -> bool:
        """Host MP/TP check combined with the usage count for managed skills."""
        record = self._record(skill)
        if record is None or not user.can_pay_host_cost(record):
            return False
        coord = self.coordinate_of(record)
        return coord is None or user.ledger.has_uses(coord)

    def pay(self, user: MagicUser, skill: SkillRef) -> PayResult:
        coord = self.coordinate_of(skill)
        if coord is None:
            return PayResult.UNMANAGED
        result = user.ledger.consume(coord)
        if result is PayResult.INSUFFICIENT_USES:
            log.info("%s has no uses left at type %d level %d", user.name, coord.type, coord.level)
        return result

    def pay_skill_cost(self, user: MagicUser, skill: SkillRef) -> PayResult:
        record = self._record(skill)
        if record is None:
            raise KeyError(f"Unknown skill {skill!r}")
        coord = self.coordinate_of(record)
        if coord is not None and not user.ledger.has_uses(coord):
            return PayResult.INSUFFICIENT_USES
        user.pay_host_cost(record)
        return self.pay(user, record)

    # --- Listing ---
    def skills_for(
        self, user: MagicUser, stype_id: int, level: Optional[int] = None
    ) -> List[SkillLike]:
        """Learned skills of ``stype_id``, optionally scoped to one spell level."""
        scope: Iterable[int] | None = None
        if level is not None:
            type_ = self.coords.type_of_stype(stype_id)
            if type_ is None:
                return []
            scope = self.coords.skill_ids_at(type_, level)
        out: List[SkillLike] = []
        for skill_id in user.skill_ids():
            record = self.skills.get_skill(skill_id)
            if record is None or record.stype_id != stype_id:
                continue
            if scope is not None and skill_id not in scope:
                continue
            out.append(record)
        return out


__all__ = ["MagicCountSystem", "SkillRef"]
