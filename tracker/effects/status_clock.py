"""
Status and cooldown clock.

Stateless tick functions invoked by the turn sequencer and by the rest and
reset operations. Each tick decrements the matching durations and then drops
every expired status in the same step.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from core.constants import DurationType

from .status import Status

if TYPE_CHECKING:
    from actions.action import Action
    from combatant.main import Combatant


def tick_statuses(statuses: Iterable[Status], duration_type: DurationType) -> list[Status]:
    """
    Decrement the statuses consumed by one tick and drop the expired ones.

    Args:
        statuses (Iterable[Status]):
            The statuses of a combatant.
        duration_type (DurationType):
            The kind of tick being applied (rounds or turns).

    Returns:
        list[Status]:
            The surviving statuses, in their original order.

    """
    remaining: list[Status] = []
    for status in statuses:
        if status.duration_type == duration_type and not status.is_permanent and status.duration > 0:
            status.duration -= 1
        if not status.is_expired:
            remaining.append(status)
    return remaining


def tick_cooldowns(actions: Iterable[Action]) -> None:
    """Decrement the remaining cooldown of every action, floored at zero."""
    for action in actions:
        action.tick_cooldown()


def reset_cooldowns(actions: Iterable[Action]) -> None:
    """Make every action immediately ready again."""
    for action in actions:
        action.current_cooldown = 0


def round_tick(combatant: Combatant) -> None:
    """
    Apply the round-boundary tick to a combatant: rounds-typed statuses lose
    one duration and every action cooldown goes down by one.
    """
    combatant.statuses = tick_statuses(combatant.statuses, DurationType.ROUNDS)
    tick_cooldowns(combatant.all_actions())


def turn_tick(combatant: Combatant) -> None:
    """
    Apply the turn-boundary tick to a combatant: turns-typed statuses lose one
    duration. Cooldowns are not affected.
    """
    combatant.statuses = tick_statuses(combatant.statuses, DurationType.TURNS)


def clear_temporary_statuses(combatant: Combatant) -> None:
    """Drop every status that is not untilRemoved."""
    combatant.statuses = [s for s in combatant.statuses if s.is_permanent]
