"""
Combatant management module for the tracker.

Defines the Combatant record: one participant of the encounter with its
resources, action lists, statuses, equipment and mortality flags.
"""

from collections.abc import Iterator
from typing import Any

from actions.action import Action
from catchery import log_warning
from core.constants import ActionType, EquipmentSlot, Faction
from core.models import TrackerModel
from core.utils import new_id
from effects.status import Status
from items.equipment_item import EquipmentItem
from pydantic import AliasChoices, Field

from .combatant_stats import Characteristics, DeathSaves


class Combatant(TrackerModel):
    """
    Represents one participant of the encounter.

    Players and NPCs track health through `hp_current`/`hp_max`. Bosses use
    the `damage_dealt` counter instead, which only grows with damage and
    shrinks with healing.

    Attributes:
        id (str):
            Unique identifier of the combatant.
        name (str):
            The name shown in the tracker.
        initiative (int):
            Initiative score, higher acts first.
        faction (Faction):
            Player, NPC or boss.
        hp_current (int), hp_max (int):
            Health pool, unused for bosses.
        mp_current (int), mp_max (int):
            Mana pool, mp_max == 0 means no pool.
        attacks, abilities, spells (list[Action]):
            The three action lists.
        statuses (list[Status]):
            The statuses currently on the combatant.
        equipment (dict[EquipmentSlot, EquipmentItem]):
            The equipped items by slot.
        is_dead, is_unconscious, is_permanently_dead (bool):
            Mortality flags, see combat.mortality.
        death_saves (DeathSaves | None):
            Death-save counters while unconscious.
        damage_dealt (int):
            Accumulated damage of a boss.

    """

    id: str = Field(
        default_factory=new_id,
        description="Unique identifier of the combatant.",
    )
    name: str = Field(
        description="The name of the combatant.",
    )
    initiative: int = Field(
        default=0,
        description="Initiative score used for turn ordering (descending).",
    )
    faction: Faction = Field(
        description="The side of the combatant, which selects its health model.",
    )
    hp_max: int = Field(
        default=1,
        description="Maximum hit points, at least 1.",
    )
    hp_current: int = Field(
        default=0,
        validation_alias=AliasChoices("hpCurrent", "hp_current", "hpCurr"),
        serialization_alias="hpCurrent",
        description="Current hit points, between 0 and hp_max.",
    )
    mp_max: int = Field(
        default=0,
        description="Maximum mana points, 0 for no mana pool.",
    )
    mp_current: int = Field(
        default=0,
        validation_alias=AliasChoices("mpCurrent", "mp_current", "mpCurr"),
        serialization_alias="mpCurrent",
        description="Current mana points, between 0 and mp_max.",
    )
    armor_class: int = Field(
        default=10,
        validation_alias=AliasChoices("armorClass", "armor_class", "ac"),
        serialization_alias="armorClass",
        description="Armor class.",
    )
    skills: list[str] = Field(
        default_factory=list,
        description="Free-text skill names.",
    )
    characteristics: Characteristics = Field(
        default_factory=Characteristics,
        description="The six characteristic scores.",
    )
    attacks: list[Action] = Field(default_factory=list, description="Attack actions.")
    abilities: list[Action] = Field(default_factory=list, description="Ability actions.")
    spells: list[Action] = Field(default_factory=list, description="Spell actions.")
    statuses: list[Status] = Field(
        default_factory=list,
        description="Statuses currently on the combatant.",
    )
    equipment: dict[EquipmentSlot, EquipmentItem] = Field(
        default_factory=dict,
        description="Equipped items by slot.",
    )
    is_dead: bool = Field(default=False, description="Dead, resurrectable by hand.")
    is_unconscious: bool = Field(default=False, description="Unconscious, making death saves.")
    is_permanently_dead: bool = Field(default=False, description="Dead for good.")
    death_saves: DeathSaves | None = Field(
        default=None,
        description="Death-save counters, present while unconscious.",
    )
    damage_dealt: int = Field(
        default=0,
        description="Accumulated damage taken by a boss.",
    )
    description: str | None = Field(
        default=None,
        description="Optional free-text notes.",
    )

    def model_post_init(self, _: Any) -> None:
        """
        Enforce the resource invariants, correcting out-of-range values found
        in hand-edited or older saves instead of rejecting the record.
        """
        corrected: dict[str, Any] = {}
        if self.hp_max < 1:
            corrected["hp_max"] = self.hp_max
            self.hp_max = 1
        if not 0 <= self.hp_current <= self.hp_max:
            corrected["hp_current"] = self.hp_current
            self.hp_current = min(self.hp_max, max(0, self.hp_current))
        if self.mp_max < 0:
            corrected["mp_max"] = self.mp_max
            self.mp_max = 0
        if not 0 <= self.mp_current <= self.mp_max:
            corrected["mp_current"] = self.mp_current
            self.mp_current = min(self.mp_max, max(0, self.mp_current))
        if self.damage_dealt < 0:
            corrected["damage_dealt"] = self.damage_dealt
            self.damage_dealt = 0
        if self.armor_class < 0:
            corrected["armor_class"] = self.armor_class
            self.armor_class = 0
        for slot, item in self.equipment.items():
            if item.slot != slot:
                item.slot = slot
        if corrected:
            log_warning(
                f"Corrected out-of-range values on {self.name}",
                {"combatant": self.id, **corrected},
            )

    # ============================================================================
    # HEALTH MODEL
    # ============================================================================

    @property
    def is_boss(self) -> bool:
        """True if health is tracked through the damage counter."""
        return self.faction == Faction.BOSS

    @property
    def colored_name(self) -> str:
        """Returns the combatant name colored by faction."""
        return self.faction.colorize(self.name)

    def is_alive(self) -> bool:
        """True if the combatant is neither dead nor unconscious."""
        return not (self.is_dead or self.is_unconscious or self.is_permanently_dead)

    def hp_ratio(self) -> float:
        """Returns current HP as a fraction of the maximum."""
        return self.hp_current / self.hp_max if self.hp_max > 0 else 0.0

    # ============================================================================
    # ACTIONS
    # ============================================================================

    def actions_for(self, action_type: ActionType) -> list[Action]:
        """
        Returns the action list of the given category.

        Args:
            action_type (ActionType):
                The category of the list.

        Returns:
            list[Action]:
                The live list, mutations affect the combatant.

        """
        if action_type == ActionType.ATTACK:
            return self.attacks
        if action_type == ActionType.ABILITY:
            return self.abilities
        return self.spells

    def all_actions(self) -> Iterator[Action]:
        """Iterates over attacks, abilities and spells in that order."""
        yield from self.attacks
        yield from self.abilities
        yield from self.spells

    def find_action(self, action_id: str, action_type: ActionType | None = None) -> Action | None:
        """
        Finds an action by id.

        Args:
            action_id (str):
                The id of the action.
            action_type (ActionType | None):
                Restrict the search to one category list.

        Returns:
            Action | None:
                The matching action, or None.

        """
        candidates = self.actions_for(action_type) if action_type else self.all_actions()
        for action in candidates:
            if action.id == action_id:
                return action
        return None

    # ============================================================================
    # STATUSES
    # ============================================================================

    def has_status(self, name: str) -> bool:
        """True if a status with the given name (case-insensitive) is present."""
        return any(s.matches_name(name) for s in self.statuses)

    def manual_statuses(self) -> list[Status]:
        """Returns the statuses that were not derived from equipment."""
        return [s for s in self.statuses if not s.is_from_equipment]
