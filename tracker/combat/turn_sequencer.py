"""
Turn sequencer.

Walks the initiative order of a session. Advancing fires the status and
cooldown clock at turn and round boundaries; stepping back does not rewind
anything it already consumed.
"""

from catchery import log_warning
from core.constants import LogType
from core.errors import EmptyRosterError
from effects.status_clock import clear_temporary_statuses, reset_cooldowns, round_tick, turn_tick

from .session import CombatSession, current_participant, sorted_participants


def _roster_size(session: CombatSession) -> int:
    size = len(session.participants)
    if size == 0:
        raise EmptyRosterError("the roster is empty")
    return size


def advance_turn(session: CombatSession) -> CombatSession:
    """
    Moves to the next combatant in initiative order.

    When the index wraps back to the first combatant a new round begins:
    the round counter goes up, a round entry is logged and every combatant
    gets the round tick. Every combatant then gets the turn tick, and the new
    current combatant is logged.

    Args:
        session (CombatSession):
            The current session, left untouched.

    Returns:
        CombatSession:
            The session after the advance. With an empty roster it is an
            unchanged copy.

    """
    updated = session.updated()
    try:
        roster_size = _roster_size(updated)
    except EmptyRosterError as e:
        log_warning(f"Cannot advance the turn: {e}", {"round": updated.current_round})
        return updated

    updated.current_turn_index = (updated.current_turn_index + 1) % roster_size
    if updated.current_turn_index == 0:
        updated.current_round += 1
        updated.log(f"Round {updated.current_round} begins", LogType.ROUND)
        for combatant in updated.participants:
            round_tick(combatant)

    for combatant in updated.participants:
        turn_tick(combatant)

    current = current_participant(updated)
    if current is not None:
        updated.log(f"Turn: {current.name}", LogType.TURN)
    return updated


def previous_turn(session: CombatSession) -> CombatSession:
    """
    Steps back to the previous combatant in initiative order.

    No clock tick is reversed and the round counter is left alone.
    """
    updated = session.updated()
    try:
        roster_size = _roster_size(updated)
    except EmptyRosterError as e:
        log_warning(f"Cannot step back: {e}", {"round": updated.current_round})
        return updated

    updated.current_turn_index = (updated.current_turn_index - 1) % roster_size
    current = sorted_participants(updated)[updated.current_turn_index]
    updated.log(f"Returned to turn: {current.name}", LogType.TURN)
    return updated


def reset_combat(session: CombatSession) -> CombatSession:
    """
    Starts the encounter over.

    The turn pointer and the round go back to the start, every temporary
    status is dropped and every cooldown is cleared. Statuses that last until
    removed, equipment bonuses included, are kept.
    """
    updated = session.updated()
    updated.current_turn_index = 0
    updated.current_round = 1
    for combatant in updated.participants:
        clear_temporary_statuses(combatant)
        reset_cooldowns(combatant.all_actions())
    updated.log("Combat reset: temporary statuses and cooldowns cleared", LogType.ROUND)
    return updated
