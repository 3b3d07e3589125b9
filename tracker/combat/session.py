"""
Combat session module for the tracker.

The session is the whole durable state of an encounter: the roster, the turn
pointer, the round counter and the event log. Engine operations never mutate
a session they receive; they work on a deep copy and return it.
"""

from typing import Any, Callable

from catchery import log_warning
from combatant.main import Combatant
from core.constants import LogType
from core.models import TrackerModel
from pydantic import Field

from .event_log import EventLog, EventLogEntry


class CombatSession(TrackerModel):
    """
    The durable state of an encounter.

    `current_turn_index` points into the initiative-descending ordering of
    `participants`, which is recomputed on every read by
    `sorted_participants` and never cached.
    """

    participants: list[Combatant] = Field(
        default_factory=list,
        description="The combatants of the encounter, in insertion order.",
    )
    current_turn_index: int = Field(
        default=0,
        description="Zero-based index into the initiative ordering.",
    )
    current_round: int = Field(
        default=1,
        description="The current round, starting at 1.",
    )
    event_log: EventLog = Field(
        default_factory=EventLog,
        description="The audit trail of the encounter.",
    )

    def model_post_init(self, _: Any) -> None:
        """Keep the turn pointer and round counter inside their bounds."""
        self.current_round = max(1, self.current_round)
        self.current_turn_index = clamp_turn_index(
            self.current_turn_index, len(self.participants)
        )

    def find(self, combatant_id: str) -> Combatant | None:
        """Returns the combatant with the given id, or None."""
        for combatant in self.participants:
            if combatant.id == combatant_id:
                return combatant
        return None

    def log(self, message: str, log_type: LogType) -> EventLogEntry:
        """Appends an entry to the event log of this session."""
        return self.event_log.add(message, log_type)

    def updated(self) -> "CombatSession":
        """Returns a deep copy to be modified by an engine operation."""
        return self.model_copy(deep=True)


def clamp_turn_index(index: int, roster_size: int) -> int:
    """Clamps a turn index into a roster of the given size."""
    if roster_size <= 0:
        return 0
    return min(max(0, index), roster_size - 1)


def sorted_participants(session: CombatSession) -> list[Combatant]:
    """
    Returns the participants ordered by initiative, highest first.

    Python's sort is stable, so ties keep their insertion order.
    """
    return sorted(session.participants, key=lambda c: c.initiative, reverse=True)


def current_participant(session: CombatSession) -> Combatant | None:
    """Returns the combatant whose turn it is, or None for an empty roster."""
    ordered = sorted_participants(session)
    if not ordered:
        return None
    return ordered[clamp_turn_index(session.current_turn_index, len(ordered))]


def apply_to_combatant(
    session: CombatSession,
    combatant_id: str,
    operation: Callable[[Combatant, EventLog], None],
    operation_name: str,
) -> CombatSession:
    """
    Runs a single-combatant operation on a copy of the session.

    Args:
        session (CombatSession):
            The current session, left untouched.
        combatant_id (str):
            The id of the combatant to operate on.
        operation (Callable[[Combatant, EventLog], None]):
            Mutates the combatant and appends to the event log.
        operation_name (str):
            Name used when reporting an unknown id.

    Returns:
        CombatSession:
            The updated copy. If the id is unknown the copy is unchanged.

    """
    updated = session.updated()
    combatant = updated.find(combatant_id)
    if combatant is None:
        log_warning(
            f"Ignoring {operation_name} on unknown combatant",
            {"combatant_id": combatant_id, "operation": operation_name},
        )
        return updated
    operation(combatant, updated.event_log)
    return updated
