"""
Tests for short and long rests.
"""

import pytest
from actions.action import Action
from combat.rest import RestPreset, RestSettings, long_rest, short_rest
from combat.session import CombatSession
from combatant.combatant_stats import DeathSaves
from combatant.main import Combatant
from core.constants import ActionType, DurationType, Faction, LogType
from effects.status import Status


@pytest.fixture
def session():
    return CombatSession(
        participants=[
            Combatant(
                id="monk",
                name="Monk",
                faction=Faction.PLAYER,
                hp_max=41,
                hp_current=10,
                mp_max=10,
                mp_current=2,
                attacks=[Action(name="Punch", type=ActionType.ATTACK, cooldown=1, current_cooldown=1)],
                abilities=[
                    Action(name="Flurry", type=ActionType.ABILITY, cooldown=1, current_cooldown=1),
                    Action(name="Stunning Strike", type=ActionType.ABILITY, cooldown=3, current_cooldown=2),
                ],
                spells=[Action(name="Shadow Step", type=ActionType.SPELL, cooldown=2, current_cooldown=2)],
                statuses=[
                    Status(name="Focused", duration=3),
                    Status(name="Blessed", duration_type=DurationType.UNTIL_REMOVED),
                ],
            ),
            Combatant(
                id="knight",
                name="Knight",
                faction=Faction.PLAYER,
                hp_max=50,
                hp_current=0,
                is_unconscious=True,
                death_saves=DeathSaves(successes=1, failures=2),
            ),
            Combatant(
                id="ghost",
                name="Ghost",
                faction=Faction.PLAYER,
                hp_max=30,
                hp_current=0,
                is_dead=True,
                is_permanently_dead=True,
            ),
        ]
    )


def test_short_rest_is_additive(session):
    """Short rest adds a share of the maximum, capped at the maximum."""
    updated = short_rest(session)
    monk = updated.find("monk")
    assert monk.hp_current == 10 + 41 * 50 // 100
    assert monk.mp_current == 7
    assert updated.event_log.messages(LogType.REST) == ["Short rest completed"]


def test_short_rest_caps_at_maximum(session):
    settings = RestSettings(short_rest=RestPreset(hp_percent=100, mp_percent=100))
    monk = short_rest(session, settings).find("monk")
    assert monk.hp_current == 41
    assert monk.mp_current == 10


def test_short_rest_only_resets_short_ability_cooldowns(session):
    monk = short_rest(session).find("monk")
    assert [a.current_cooldown for a in monk.abilities] == [0, 2]
    assert monk.attacks[0].current_cooldown == 1
    assert monk.spells[0].current_cooldown == 2


def test_short_rest_keeps_statuses_and_mortality(session):
    updated = short_rest(session)
    assert len(updated.find("monk").statuses) == 2
    knight = updated.find("knight")
    assert knight.is_unconscious
    assert knight.death_saves.failures == 2


def test_long_rest_sets_absolute_values(session):
    settings = RestSettings(long_rest=RestPreset(hp_percent=50, mp_percent=0))
    monk = long_rest(session, settings).find("monk")
    assert monk.hp_current == 20
    assert monk.mp_current == 0


def test_long_rest_wipes_statuses_and_cooldowns(session):
    updated = long_rest(session)
    monk = updated.find("monk")
    assert monk.statuses == []
    assert all(a.current_cooldown == 0 for a in monk.all_actions())
    assert monk.hp_current == 41
    assert updated.event_log.messages() == ["Long rest completed"]


def test_long_rest_clears_mortality(session):
    knight = long_rest(session).find("knight")
    assert not knight.is_unconscious
    assert not knight.is_dead
    assert knight.death_saves is None
    assert knight.hp_current == 50


def test_long_rest_leaves_permanently_dead(session):
    ghost = long_rest(session).find("ghost")
    assert ghost.is_permanently_dead
    assert ghost.is_dead
    assert ghost.hp_current == 0


def test_rest_does_not_mutate_input(session):
    long_rest(session)
    assert session.find("monk").hp_current == 10


def test_rest_settings_defaults():
    settings = RestSettings()
    assert (settings.short_rest.hp_percent, settings.short_rest.mp_percent) == (50, 50)
    assert (settings.long_rest.hp_percent, settings.long_rest.mp_percent) == (100, 100)


def test_rest_preset_rejects_out_of_range():
    with pytest.raises(ValueError):
        RestPreset(hp_percent=150)
