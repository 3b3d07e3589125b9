"""
Tests for status durations and cooldown ticks.
"""

import pytest
from actions.action import Action
from combatant.main import Combatant
from core.constants import ActionType, DurationType, Faction
from effects.status import Status
from effects.status_clock import (
    clear_temporary_statuses,
    round_tick,
    tick_statuses,
    turn_tick,
)


@pytest.fixture
def paladin():
    return Combatant(
        name="Paladin",
        faction=Faction.PLAYER,
        hp_max=44,
        hp_current=44,
        abilities=[Action(name="Lay on Hands", type=ActionType.ABILITY, cooldown=2, current_cooldown=1)],
        statuses=[
            Status(name="Aura", duration_type=DurationType.UNTIL_REMOVED, duration=0),
            Status(name="Blessed", duration=2, duration_type=DurationType.ROUNDS),
            Status(name="Dazed", duration=1, duration_type=DurationType.TURNS),
        ],
    )


def test_decrement_then_filter():
    """A status reaching 0 on this tick is removed in the same tick."""
    statuses = [Status(name="Hasted", duration=1), Status(name="Slowed", duration=3)]
    remaining = tick_statuses(statuses, DurationType.ROUNDS)
    assert [(s.name, s.duration) for s in remaining] == [("Slowed", 2)]


def test_other_duration_types_untouched():
    statuses = [Status(name="Dazed", duration=1, duration_type=DurationType.TURNS)]
    remaining = tick_statuses(statuses, DurationType.ROUNDS)
    assert remaining[0].duration == 1


def test_until_removed_never_expires():
    statuses = [Status(name="Cursed", duration=0, duration_type=DurationType.UNTIL_REMOVED)]
    for _ in range(5):
        statuses = tick_statuses(statuses, DurationType.ROUNDS)
        statuses = tick_statuses(statuses, DurationType.TURNS)
    assert [s.name for s in statuses] == ["Cursed"]


def test_round_tick(paladin):
    round_tick(paladin)
    assert [(s.name, s.duration) for s in paladin.statuses] == [("Aura", 0), ("Blessed", 1), ("Dazed", 1)]
    assert paladin.abilities[0].current_cooldown == 0
    round_tick(paladin)
    assert paladin.abilities[0].current_cooldown == 0


def test_turn_tick_leaves_cooldowns(paladin):
    turn_tick(paladin)
    assert [s.name for s in paladin.statuses] == ["Aura", "Blessed"]
    assert paladin.abilities[0].current_cooldown == 1


def test_clear_temporary_statuses(paladin):
    clear_temporary_statuses(paladin)
    assert [s.name for s in paladin.statuses] == ["Aura"]


def test_duration_label():
    assert Status(name="Blessed", duration=3).duration_label == "3r"
    assert Status(name="Dazed", duration=2, duration_type=DurationType.TURNS).duration_label == "2t"
    assert Status(name="Aura", duration_type=DurationType.UNTIL_REMOVED).duration_label == "∞"
