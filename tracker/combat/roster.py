"""
Roster operations.

Adding, removing and editing participants, quick HP adjustments from the
participant row, manual status and action edits, and equipment changes.
Every operation returns a new session.
"""

import math
from typing import Any, Callable

from actions.action import Action
from catchery import log_debug, log_warning
from combatant.combatant_stats import CHARACTERISTICS
from combatant.main import Combatant
from core.constants import ActionType, EquipmentSlot, LogType
from core.validation import coerce_number, ensure_int_in_range, ensure_non_negative_int
from effects.status import Status
from items.equipment_item import EquipmentItem
from items.equipment_sync import sync_equipment_statuses

from .action_resolver import apply_damage, apply_healing
from .event_log import EventLog
from .session import CombatSession, apply_to_combatant, clamp_turn_index


# ============================================================================
# PARTICIPANTS
# ============================================================================


def add_participant(session: CombatSession, combatant: Combatant) -> CombatSession:
    """Adds a combatant to the roster, exactly as supplied."""
    updated = session.updated()
    updated.participants.append(combatant.model_copy(deep=True))
    updated.log(f"{combatant.name} joined the battle", LogType.TURN)
    return updated


def remove_participant(session: CombatSession, combatant_id: str) -> CombatSession:
    """
    Removes a combatant from the roster.

    The turn pointer is clamped into the smaller roster.
    """
    updated = session.updated()
    combatant = updated.find(combatant_id)
    if combatant is None:
        log_warning(
            "Ignoring removal of unknown combatant",
            {"combatant_id": combatant_id},
        )
        return updated
    updated.participants = [c for c in updated.participants if c.id != combatant_id]
    updated.current_turn_index = clamp_turn_index(
        updated.current_turn_index, len(updated.participants)
    )
    updated.log(f"{combatant.name} left the battle", LogType.TURN)
    return updated


def update_participant(session: CombatSession, combatant: Combatant) -> CombatSession:
    """Replaces the combatant with the same id, keeping its roster position."""
    updated = session.updated()
    for index, existing in enumerate(updated.participants):
        if existing.id == combatant.id:
            updated.participants[index] = combatant.model_copy(deep=True)
            return updated
    log_warning(
        "Ignoring update of unknown combatant",
        {"combatant_id": combatant.id, "name": combatant.name},
    )
    return updated


# ============================================================================
# NUMERIC EDITS
# ============================================================================


def _edit(
    session: CombatSession,
    combatant_id: str,
    name: str,
    edit: Callable[[Combatant, dict[str, Any]], None],
) -> CombatSession:
    def operation(combatant: Combatant, _: EventLog) -> None:
        edit(combatant, {"combatant": combatant.name})

    return apply_to_combatant(session, combatant_id, operation, name)


def set_hp_max(session: CombatSession, combatant_id: str, value: Any) -> CombatSession:
    """Sets the maximum HP, at least 1. The current HP follows it down."""

    def edit(c: Combatant, context: dict[str, Any]) -> None:
        c.hp_max = ensure_int_in_range(value, "hp_max", 1, None, context)
        c.hp_current = min(c.hp_current, c.hp_max)

    return _edit(session, combatant_id, "set_hp_max", edit)


def set_hp_current(session: CombatSession, combatant_id: str, value: Any) -> CombatSession:
    """Sets the current HP, between 0 and the maximum."""

    def edit(c: Combatant, context: dict[str, Any]) -> None:
        c.hp_current = ensure_int_in_range(value, "hp_current", 0, c.hp_max, context)

    return _edit(session, combatant_id, "set_hp_current", edit)


def set_mp_max(session: CombatSession, combatant_id: str, value: Any) -> CombatSession:
    """Sets the maximum MP, 0 for no mana pool. The current MP follows it down."""

    def edit(c: Combatant, context: dict[str, Any]) -> None:
        c.mp_max = ensure_non_negative_int(value, "mp_max", context)
        c.mp_current = min(c.mp_current, c.mp_max)

    return _edit(session, combatant_id, "set_mp_max", edit)


def set_mp_current(session: CombatSession, combatant_id: str, value: Any) -> CombatSession:
    """Sets the current MP, between 0 and the maximum."""

    def edit(c: Combatant, context: dict[str, Any]) -> None:
        c.mp_current = ensure_int_in_range(value, "mp_current", 0, c.mp_max, context)

    return _edit(session, combatant_id, "set_mp_current", edit)


def set_armor_class(session: CombatSession, combatant_id: str, value: Any) -> CombatSession:
    def edit(c: Combatant, context: dict[str, Any]) -> None:
        c.armor_class = ensure_non_negative_int(value, "armor_class", context)

    return _edit(session, combatant_id, "set_armor_class", edit)


def set_initiative(session: CombatSession, combatant_id: str, value: Any) -> CombatSession:
    """Sets the initiative. Negative scores are allowed, non-numbers become 0."""

    def edit(c: Combatant, context: dict[str, Any]) -> None:
        number = coerce_number(value)
        if number is None:
            log_warning("initiative is not a number, correcting to 0", {**context, "value": value})
            c.initiative = 0
        else:
            c.initiative = math.floor(number)

    return _edit(session, combatant_id, "set_initiative", edit)


def set_characteristic(
    session: CombatSession, combatant_id: str, name: str, value: Any
) -> CombatSession:
    """
    Sets one of the six characteristic scores, between 1 and 30.

    Args:
        session (CombatSession):
            The current session, left untouched.
        combatant_id (str):
            The combatant to edit.
        name (str):
            The characteristic, e.g. "strength".
        value (Any):
            The raw input value.

    Returns:
        CombatSession:
            The updated session. Unknown characteristic names leave it as is.

    """
    if name not in CHARACTERISTICS:
        log_warning("Ignoring unknown characteristic", {"name": name, "combatant_id": combatant_id})
        return session.updated()

    def edit(c: Combatant, context: dict[str, Any]) -> None:
        setattr(c.characteristics, name, ensure_int_in_range(value, name, 1, 30, context))

    return _edit(session, combatant_id, "set_characteristic", edit)


# ============================================================================
# QUICK HP ADJUSTMENTS
# ============================================================================


def quick_damage(session: CombatSession, combatant_id: str, amount: Any) -> CombatSession:
    """
    Deals damage straight from the participant row, with no action or verdict.

    Follows the same faction rules as damage from an action.
    """

    def operation(c: Combatant, log: EventLog) -> None:
        apply_damage(c, ensure_non_negative_int(amount, "damage", {"combatant": c.name}), log)

    return apply_to_combatant(session, combatant_id, operation, "quick_damage")


def quick_heal(session: CombatSession, combatant_id: str, amount: Any) -> CombatSession:
    """Heals straight from the participant row, with no action or verdict."""

    def operation(c: Combatant, log: EventLog) -> None:
        apply_healing(c, ensure_non_negative_int(amount, "healing", {"combatant": c.name}), log)

    return apply_to_combatant(session, combatant_id, operation, "quick_heal")


# ============================================================================
# MANUAL STATUSES
# ============================================================================


def add_status(session: CombatSession, combatant_id: str, status: Status) -> CombatSession:
    """Puts a manually created status on a combatant."""

    def operation(c: Combatant, log: EventLog) -> None:
        c.statuses.append(status.model_copy(deep=True))
        log.add(f'{c.name} gains status "{status.name}"', LogType.STATUS)

    return apply_to_combatant(session, combatant_id, operation, "add_status")


def remove_status(session: CombatSession, combatant_id: str, status_id: str) -> CombatSession:
    """Removes one status by id. Unknown status ids are ignored."""

    def operation(c: Combatant, log: EventLog) -> None:
        removed = next((s for s in c.statuses if s.id == status_id), None)
        if removed is None:
            log_debug(f"{c.name} has no status with id '{status_id}'.")
            return
        c.statuses = [s for s in c.statuses if s.id != status_id]
        log.add(f'{c.name} loses status "{removed.name}"', LogType.STATUS)

    return apply_to_combatant(session, combatant_id, operation, "remove_status")


def update_status(session: CombatSession, combatant_id: str, status: Status) -> CombatSession:
    """Replaces the status with the same id in place, keeping its position."""

    def operation(c: Combatant, _: EventLog) -> None:
        for index, existing in enumerate(c.statuses):
            if existing.id == status.id:
                c.statuses[index] = status.model_copy(deep=True)
                log_debug(f"{c.name} status '{status.name}' updated.")
                return
        log_warning(
            "Ignoring update of unknown status",
            {"combatant": c.name, "status_id": status.id, "name": status.name},
        )

    return apply_to_combatant(session, combatant_id, operation, "update_status")


# ============================================================================
# ACTIONS
# ============================================================================


def save_action(session: CombatSession, combatant_id: str, action: Action) -> CombatSession:
    """
    Stores an action in the list of its category.

    An action with the same id in that list is replaced in place, otherwise
    the action is appended.
    """

    def operation(c: Combatant, _: EventLog) -> None:
        actions = c.actions_for(action.type)
        saved = action.model_copy(deep=True)
        for index, existing in enumerate(actions):
            if existing.id == action.id:
                actions[index] = saved
                log_debug(f"{c.name} action '{action.name}' replaced.")
                return
        actions.append(saved)
        log_debug(f"{c.name} action '{action.name}' added to {action.type.value} list.")

    return apply_to_combatant(session, combatant_id, operation, "save_action")


def delete_action(
    session: CombatSession, combatant_id: str, action_type: ActionType, action_id: str
) -> CombatSession:
    """Removes an action by id from the list of the given category."""

    def operation(c: Combatant, _: EventLog) -> None:
        actions = c.actions_for(action_type)
        remaining = [a for a in actions if a.id != action_id]
        if len(remaining) == len(actions):
            log_warning(
                "Ignoring deletion of unknown action",
                {"combatant": c.name, "action_id": action_id, "action_type": action_type.value},
            )
            return
        actions[:] = remaining
        log_debug(f"{c.name} action '{action_id}' deleted.")

    return apply_to_combatant(session, combatant_id, operation, "delete_action")


# ============================================================================
# EQUIPMENT
# ============================================================================


def equip_item(
    session: CombatSession, combatant_id: str, slot: EquipmentSlot, item: EquipmentItem
) -> CombatSession:
    """
    Equips an item in a slot, replacing whatever was there, and rebuilds the
    equipment statuses of the combatant.
    """

    def operation(c: Combatant, _: EventLog) -> None:
        equipped = item.model_copy(deep=True)
        equipped.slot = slot
        c.equipment[slot] = equipped
        sync_equipment_statuses(c)

    return apply_to_combatant(session, combatant_id, operation, "equip_item")


def unequip_item(session: CombatSession, combatant_id: str, slot: EquipmentSlot) -> CombatSession:
    """Empties a slot and rebuilds the equipment statuses of the combatant."""

    def operation(c: Combatant, _: EventLog) -> None:
        c.equipment.pop(slot, None)
        sync_equipment_statuses(c)

    return apply_to_combatant(session, combatant_id, operation, "unequip_item")
