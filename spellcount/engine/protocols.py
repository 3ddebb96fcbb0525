"""Capability interfaces a host implements so the usage-count system can reach it."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Mapping, Optional, Protocol

if TYPE_CHECKING:
    from .ledger import UsageLedger


class Annotated(Protocol):
    id: int
    meta: Mapping[str, object]


class SkillLike(Annotated, Protocol):
    stype_id: int


class StatSource(Protocol):
    def param_base(self, param_id: int) -> int:
        """Base parameter value, excluding equipment and state modifiers."""
        ...


class LearnableSkillHolder(Protocol):
    def is_learned_skill(self, skill_id: int) -> bool: ...

    def skill_ids(self) -> Iterable[int]: ...


class HostCostPayer(Protocol):
    """The host's own MP/TP accounting for a skill."""

    def can_pay_host_cost(self, skill: SkillLike) -> bool: ...

    def pay_host_cost(self, skill: SkillLike) -> None: ...


class MagicUser(StatSource, LearnableSkillHolder, HostCostPayer, Protocol):
    name: str
    ledger: "UsageLedger"

    @property
    def class_id(self) -> Optional[int]: ...


class ClassRepository(Protocol):
    def get_class(self, class_id: int) -> Optional[Annotated]: ...


class SkillRepository(Protocol):
    def get_skill(self, skill_id: int) -> Optional[SkillLike]: ...


class PartyRoster(Protocol):
    def member_ids(self) -> List[int]: ...

    def actor(self, actor_id: int) -> Optional[MagicUser]: ...


__all__ = [
    "Annotated",
    "ClassRepository",
    "HostCostPayer",
    "LearnableSkillHolder",
    "MagicUser",
    "PartyRoster",
    "SkillLike",
    "SkillRepository",
    "StatSource",
]
