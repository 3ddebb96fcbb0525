"""Skill selection flow for usage-count families, shared by the menu and battle screens.

The host owns the widgets and input loop; it forwards confirm/cancel/move
events here and the controller drives the widgets through small protocols.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Sequence

from spellcount.engine.coords import Coordinate
from spellcount.engine.protocols import MagicUser, SkillLike
from spellcount.engine.system import MagicCountSystem


class SelectionContext(Enum):
    MENU = "menu"
    BATTLE = "battle"


class SelectionMode(Enum):
    NORMAL = "normal"
    COUNT_SELECT = "count_select"


class Focus(Enum):
    CATEGORY = "category"
    LEVEL_SELECT = "level_select"
    SKILL_LIST = "skill_list"


class CategoryWidget(Protocol):
    def activate(self) -> None: ...

    def deactivate(self) -> None: ...


class SkillListWidget(Protocol):
    def set_items(self, skills: Sequence[SkillLike]) -> None: ...

    def show(self) -> None: ...

    def hide(self) -> None: ...

    def activate(self) -> None: ...

    def deactivate(self) -> None: ...

    def deselect(self) -> None: ...

    def select_last(self) -> None: ...


class HelpWidget(Protocol):
    def clear(self) -> None: ...


@dataclass(frozen=True)
class CountRow:
    level: int
    label: str
    enabled: bool


class SkillSelectionController:
    def __init__(
        self,
        context: SelectionContext,
        system: MagicCountSystem,
        category: CategoryWidget,
        skill_list: SkillListWidget,
        help_line: Optional[HelpWidget] = None,
        actor: Optional[MagicUser] = None,
    ):
        self.context = context
        self.system = system
        self.category = category
        self.skill_list = skill_list
        self.help_line = help_line
        self.actor = actor
        self._reset()

    def _reset(self) -> None:
        self.mode = SelectionMode.NORMAL
        self.focus = Focus.CATEGORY
        self.stype_id: Optional[int] = None
        self.level = 1
        self.count_row_visible = False

    # --- Queries ---
    @property
    def type_(self) -> Optional[int]:
        if self.stype_id is None:
            return None
        return self.system.coords.type_of_stype(self.stype_id)

    def count_rows(self) -> List[CountRow]:
        type_ = self.type_
        if type_ is None or self.actor is None:
            return []
        rows = []
        for lvl in range(1, self.system.settings.max_level + 1):
            coord = Coordinate(type_, lvl)
            rows.append(
                CountRow(
                    level=lvl,
                    label=self.actor.ledger.label(coord),
                    enabled=self.actor.ledger.get(coord) != 0,
                )
            )
        return rows

    def visible_skills(self) -> List[SkillLike]:
        if self.actor is None or self.stype_id is None:
            return []
        level = self.level if self.mode is SelectionMode.COUNT_SELECT else None
        return self.system.skills_for(self.actor, self.stype_id, level)

    # --- Host hooks ---
    def begin_battle_input(self, actor: MagicUser) -> None:
        """Start the flow for the battler whose command is being chosen."""
        self.actor = actor
        self._reset()

    def set_actor(self, actor: MagicUser) -> None:
        self.actor = actor
        if self.stype_id is not None:
            self._refresh_list()

    def on_category_selected(self, stype_id: int) -> None:
        self.stype_id = stype_id
        self.category.deactivate()
        if self.system.coords.is_managed_stype(stype_id):
            self.mode = SelectionMode.COUNT_SELECT
            self.level = 1
            self._refresh_list()
            self.skill_list.show()
            self.skill_list.deselect()
            if self.help_line is not None:
                self.help_line.clear()
            self._open_level_select()
        else:
            self.mode = SelectionMode.NORMAL
            self._refresh_list()
            self.skill_list.show()
            self.skill_list.activate()
            self.focus = Focus.SKILL_LIST

    def select_level(self, level: int) -> None:
        if self.mode is not SelectionMode.COUNT_SELECT:
            return
        max_level = self.system.settings.max_level
        if not 1 <= level <= max_level:
            raise ValueError(f"level must be in 1..{max_level}, got {level}")
        if level != self.level:
            self.level = level
            self._refresh_list()

    def move_level(self, delta: int) -> None:
        """Move the level cursor, wrapping around like a horizontal command row."""
        if self.mode is not SelectionMode.COUNT_SELECT or self.focus is not Focus.LEVEL_SELECT:
            return
        max_level = self.system.settings.max_level
        self.select_level((self.level - 1 + delta) % max_level + 1)

    def on_confirm_level(self) -> bool:
        """Hand focus to the skill list; refused when the level has no uses left."""
        if self.focus is not Focus.LEVEL_SELECT:
            return False
        rows = self.count_rows()
        if not rows or not rows[self.level - 1].enabled:
            return False
        self.count_row_visible = False
        self.focus = Focus.SKILL_LIST
        self.skill_list.activate()
        self.skill_list.select_last()
        return True

    def on_cancel_level(self) -> None:
        if self.focus is not Focus.LEVEL_SELECT:
            return
        self.mode = SelectionMode.NORMAL
        self.count_row_visible = False
        if self.context is SelectionContext.BATTLE:
            self.skill_list.hide()
        self.focus = Focus.CATEGORY
        self.category.activate()

    def on_skill_list_cancel(self) -> None:
        if self.focus is not Focus.SKILL_LIST:
            return
        self.skill_list.deactivate()
        if self.mode is SelectionMode.COUNT_SELECT:
            self.skill_list.deselect()
            if self.help_line is not None:
                self.help_line.clear()
            self._open_level_select()
            return
        if self.context is SelectionContext.BATTLE:
            self.skill_list.hide()
        self.focus = Focus.CATEGORY
        self.category.activate()

    def on_skill_used(self, skill: SkillLike) -> bool:
        """Re-check after the target step; back to level select when the level ran dry."""
        if self.mode is not SelectionMode.COUNT_SELECT or self.actor is None:
            return False
        if self.system.can_pay_skill_cost(self.actor, skill):
            return False
        self.skill_list.deactivate()
        self._open_level_select()
        return True

    def leave(self) -> None:
        """Drop all state when the host screen closes."""
        self._reset()

    # --- Internals ---
    def _open_level_select(self) -> None:
        self.count_row_visible = True
        self.focus = Focus.LEVEL_SELECT

    def _refresh_list(self) -> None:
        self.skill_list.set_items(self.visible_skills())


__all__ = [
    "CategoryWidget",
    "CountRow",
    "Focus",
    "HelpWidget",
    "SelectionContext",
    "SelectionMode",
    "SkillListWidget",
    "SkillSelectionController",
]
