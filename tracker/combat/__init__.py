"""
Combat module for the TTRPG combat tracker.

This module contains the combat session and every engine operation on it:
turn sequencing, action resolution, the mortality state machine, rests and
roster edits. Each operation takes a session and returns a new one.
"""

from .action_resolver import (
    apply_action,
    apply_damage,
    apply_effect,
    apply_healing,
    resolve_action,
    resolve_custom_value,
    restore_mp,
)
from .event_log import EventLog, EventLogEntry
from .mortality import (
    MortalityState,
    manual_kill,
    manual_resurrect,
    mortality_state,
    record_death_save_failure,
    record_death_save_success,
    reset_death_saves,
)
from .rest import RestPreset, RestSettings, long_rest, short_rest
from .roster import (
    add_participant,
    add_status,
    equip_item,
    quick_damage,
    quick_heal,
    remove_participant,
    remove_status,
    set_armor_class,
    set_characteristic,
    set_hp_current,
    set_hp_max,
    set_initiative,
    set_mp_current,
    set_mp_max,
    unequip_item,
    update_participant,
)
from .session import (
    CombatSession,
    apply_to_combatant,
    clamp_turn_index,
    current_participant,
    sorted_participants,
)
from .turn_sequencer import advance_turn, previous_turn, reset_combat

__all__ = [
    # Import from action_resolver.py
    "apply_action",
    "apply_damage",
    "apply_effect",
    "apply_healing",
    "resolve_action",
    "resolve_custom_value",
    "restore_mp",
    # Import from event_log.py
    "EventLog",
    "EventLogEntry",
    # Import from mortality.py
    "MortalityState",
    "manual_kill",
    "manual_resurrect",
    "mortality_state",
    "record_death_save_failure",
    "record_death_save_success",
    "reset_death_saves",
    # Import from rest.py
    "RestPreset",
    "RestSettings",
    "long_rest",
    "short_rest",
    # Import from roster.py
    "add_participant",
    "add_status",
    "equip_item",
    "quick_damage",
    "quick_heal",
    "remove_participant",
    "remove_status",
    "set_armor_class",
    "set_characteristic",
    "set_hp_current",
    "set_hp_max",
    "set_initiative",
    "set_mp_current",
    "set_mp_max",
    "unequip_item",
    "update_participant",
    # Import from session.py
    "CombatSession",
    "apply_to_combatant",
    "clamp_turn_index",
    "current_participant",
    "sorted_participants",
    # Import from turn_sequencer.py
    "advance_turn",
    "previous_turn",
    "reset_combat",
]
