"""
Mortality state machine.

A combatant is in one of four states, derived from its flags:

    Alive            no flag set
    Unconscious      is_unconscious (players only), carries death saves
    Dead             is_dead, resurrectable by hand
    PermanentlyDead  is_dead and is_permanently_dead, terminal

Bosses never leave Alive through damage: their health is the damage counter.
Manual kill and resurrect exist for every faction.
"""

from enum import Enum

from catchery import log_debug, log_warning
from combatant.combatant_stats import DeathSaves
from combatant.main import Combatant
from core.constants import DEATH_SAVE_LIMIT, Faction, LogType

from .event_log import EventLog
from .session import CombatSession, apply_to_combatant


class MortalityState(Enum):
    """The states of the mortality state machine."""

    ALIVE = "alive"
    UNCONSCIOUS = "unconscious"
    DEAD = "dead"
    PERMANENTLY_DEAD = "permanentlyDead"


def mortality_state(combatant: Combatant) -> MortalityState:
    """Returns the state encoded by the mortality flags of a combatant."""
    if combatant.is_permanently_dead:
        return MortalityState.PERMANENTLY_DEAD
    if combatant.is_dead:
        return MortalityState.DEAD
    if combatant.is_unconscious:
        return MortalityState.UNCONSCIOUS
    return MortalityState.ALIVE


# ============================================================================
# TRANSITIONS TRIGGERED BY HP CHANGES
# ============================================================================


def on_hp_reduced(combatant: Combatant, log: EventLog) -> None:
    """
    Fire the transition caused by HP reaching zero, if any.

    A player falls unconscious and starts making death saves, an NPC dies.
    Combatants that are already down are left as they are.
    """
    if combatant.is_boss or combatant.hp_current > 0:
        return
    if combatant.faction == Faction.PLAYER:
        if not combatant.is_unconscious and not combatant.is_dead:
            combatant.is_unconscious = True
            combatant.death_saves = DeathSaves()
            log.add(f"{combatant.name} falls unconscious!", LogType.DAMAGE)
    elif combatant.faction == Faction.NPC:
        if not combatant.is_dead:
            combatant.is_dead = True
            log.add(f"{combatant.name} dies!", LogType.DAMAGE)


def on_hp_restored(combatant: Combatant, log: EventLog) -> None:
    """An unconscious combatant healed above zero HP wakes up."""
    if combatant.is_unconscious and combatant.hp_current > 0:
        combatant.is_unconscious = False
        combatant.death_saves = None
        log.add(f"{combatant.name} regains consciousness!", LogType.HEAL)


# ============================================================================
# DEATH SAVES
# ============================================================================


def _can_roll_death_saves(combatant: Combatant) -> bool:
    if not combatant.is_unconscious or combatant.is_permanently_dead:
        log_debug(f"{combatant.name} is not making death saves.")
        return False
    if combatant.death_saves is None:
        combatant.death_saves = DeathSaves()
    return True


def record_success(combatant: Combatant, log: EventLog) -> None:
    """
    Record one death-save success. The third success brings the combatant
    back at 1 HP and resets the counters.
    """
    if not _can_roll_death_saves(combatant):
        return
    saves = combatant.death_saves
    assert saves is not None
    if saves.successes >= DEATH_SAVE_LIMIT:
        return
    saves.successes += 1
    if saves.successes < DEATH_SAVE_LIMIT:
        log.add(
            f"{combatant.name}: death save success ({saves.successes}/{DEATH_SAVE_LIMIT})",
            LogType.STATUS,
        )
        return
    combatant.hp_current = min(1, combatant.hp_max)
    combatant.is_unconscious = False
    combatant.is_dead = False
    combatant.death_saves = DeathSaves()
    log.add(f"{combatant.name} resurrects at 1 HP!", LogType.HEAL)


def record_failure(combatant: Combatant, log: EventLog) -> None:
    """
    Record one death-save failure. The third failure kills the combatant
    permanently.
    """
    if not _can_roll_death_saves(combatant):
        return
    saves = combatant.death_saves
    assert saves is not None
    if saves.failures >= DEATH_SAVE_LIMIT:
        return
    saves.failures += 1
    if saves.failures < DEATH_SAVE_LIMIT:
        log.add(
            f"{combatant.name}: death save failure ({saves.failures}/{DEATH_SAVE_LIMIT})",
            LogType.STATUS,
        )
        return
    combatant.hp_current = 0
    combatant.is_unconscious = False
    combatant.is_dead = True
    combatant.is_permanently_dead = True
    combatant.death_saves = DeathSaves()
    log.add(f"{combatant.name} dies permanently!", LogType.DAMAGE)


def clear_death_saves(combatant: Combatant, log: EventLog) -> None:
    """Reset the death-save counters of an unconscious combatant."""
    if not _can_roll_death_saves(combatant):
        return
    combatant.death_saves = DeathSaves()
    log.add(f"{combatant.name}: death saves reset", LogType.STATUS)


# ============================================================================
# MANUAL TRANSITIONS
# ============================================================================


def kill(combatant: Combatant, log: EventLog) -> None:
    """Kill a combatant by hand. Requires confirmation from the caller."""
    if combatant.is_dead or combatant.is_permanently_dead:
        log_warning(
            "Cannot kill a combatant that is already dead",
            {"combatant": combatant.id, "state": mortality_state(combatant).value},
        )
        return
    combatant.hp_current = 0
    combatant.is_dead = True
    combatant.is_unconscious = False
    combatant.death_saves = None
    log.add(f"{combatant.name} was killed manually", LogType.DAMAGE)


def resurrect(combatant: Combatant, log: EventLog) -> None:
    """
    Bring a dead combatant back at full HP. Requires confirmation from the
    caller. Permanently dead combatants cannot be resurrected.
    """
    if not combatant.is_dead or combatant.is_permanently_dead:
        log_warning(
            "Only dead, not permanently dead, combatants can be resurrected",
            {"combatant": combatant.id, "state": mortality_state(combatant).value},
        )
        return
    combatant.hp_current = combatant.hp_max
    combatant.is_dead = False
    combatant.is_unconscious = False
    combatant.death_saves = DeathSaves()
    log.add(f"{combatant.name} is resurrected at full HP!", LogType.HEAL)


# ============================================================================
# SESSION OPERATIONS
# ============================================================================


def record_death_save_success(session: CombatSession, combatant_id: str) -> CombatSession:
    """Session-level wrapper of record_success."""
    return apply_to_combatant(session, combatant_id, record_success, "death save success")


def record_death_save_failure(session: CombatSession, combatant_id: str) -> CombatSession:
    """Session-level wrapper of record_failure."""
    return apply_to_combatant(session, combatant_id, record_failure, "death save failure")


def reset_death_saves(session: CombatSession, combatant_id: str) -> CombatSession:
    """Session-level wrapper of clear_death_saves."""
    return apply_to_combatant(session, combatant_id, clear_death_saves, "death save reset")


def manual_kill(session: CombatSession, combatant_id: str) -> CombatSession:
    """Session-level wrapper of kill."""
    return apply_to_combatant(session, combatant_id, kill, "manual kill")


def manual_resurrect(session: CombatSession, combatant_id: str) -> CombatSession:
    """Session-level wrapper of resurrect."""
    return apply_to_combatant(session, combatant_id, resurrect, "manual resurrect")
