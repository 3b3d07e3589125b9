"""
Tests for session snapshots.
"""

import json

import pytest
from actions.action import Action
from actions.action_effect import AddStatusEffect, CustomHealEffect, DamageEffect
from combat.session import CombatSession
from combatant.combatant_stats import DeathSaves
from combatant.main import Combatant
from core.constants import ActionType, DurationType, EquipmentSlot, Faction, LogType
from core.errors import MalformedSnapshotError
from effects.status import Status
from items.equipment_item import EquipmentItem
from persistence.snapshot import (
    dump_session,
    load_session,
    load_session_file,
    parse_session,
    save_session_file,
)


@pytest.fixture
def session():
    session = CombatSession(
        participants=[
            Combatant(
                id="cleric",
                name="Cleric",
                faction=Faction.PLAYER,
                initiative=11,
                hp_max=38,
                hp_current=0,
                mp_max=12,
                mp_current=4,
                is_unconscious=True,
                death_saves=DeathSaves(successes=1, failures=1),
                spells=[
                    Action(
                        id="bless",
                        name="Bless",
                        type=ActionType.SPELL,
                        cooldown=2,
                        current_cooldown=1,
                        is_aoe=True,
                        effects=[
                            AddStatusEffect(id="e1", status_name="Blessed", status_duration=3),
                            CustomHealEffect(id="e2"),
                        ],
                    )
                ],
                statuses=[Status(name="Prone", duration=2, duration_type=DurationType.TURNS)],
                equipment={
                    EquipmentSlot.WEAPON: EquipmentItem(id="mace", name="Mace", slot=EquipmentSlot.WEAPON)
                },
            ),
            Combatant(id="ogre", name="Ogre", faction=Faction.BOSS, hp_max=59, hp_current=59, damage_dealt=17),
        ],
        current_turn_index=1,
        current_round=3,
    )
    session.log("Round 3 begins", LogType.ROUND)
    return session


def test_round_trip(session):
    restored = parse_session(dump_session(session))
    assert restored == session


def test_dump_uses_camel_case(session):
    data = json.loads(dump_session(session))
    assert set(data) == {"participants", "currentTurnIndex", "currentRound", "eventLog"}
    cleric = data["participants"][0]
    assert cleric["hpCurrent"] == 0
    assert cleric["isUnconscious"] is True
    assert cleric["deathSaves"] == {"successes": 1, "failures": 1}
    spell = cleric["spells"][0]
    assert spell["isAOE"] is True
    assert spell["currentCooldown"] == 1
    assert spell["effects"][0]["type"] == "addStatus"
    assert spell["effects"][0]["statusName"] == "Blessed"
    assert data["eventLog"][0]["type"] == "round"


def test_effects_parsed_into_variants(session):
    restored = parse_session(dump_session(session))
    effects = restored.participants[0].spells[0].effects
    assert isinstance(effects[0], AddStatusEffect)
    assert isinstance(effects[1], CustomHealEffect)


def test_missing_optional_fields():
    """Older snapshots without effects and other optional fields still load."""
    text = json.dumps(
        {
            "participants": [
                {
                    "id": "1",
                    "name": "Orc",
                    "initiative": 12,
                    "faction": "npc",
                    "hpMax": 60,
                    "hpCurr": 35,
                    "ac": 13,
                    "attacks": [{"id": "a2", "name": "Axe", "type": "attack", "cooldown": 0, "currentCooldown": 0}],
                }
            ],
            "currentTurnIndex": 0,
            "currentRound": 1,
        }
    )
    restored = parse_session(text)
    orc = restored.participants[0]
    assert orc.hp_current == 35
    assert orc.armor_class == 13
    assert orc.attacks[0].effects == []
    assert orc.statuses == []
    assert len(restored.event_log) == 0


def test_turn_index_clamped_on_load():
    restored = parse_session('{"participants": [], "currentTurnIndex": 5, "currentRound": 0}')
    assert restored.current_turn_index == 0
    assert restored.current_round == 1


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[1, 2, 3]",
        '{"participants": [{"name": "X", "faction": "dragon"}]}',
        '{"participants": [{"name": "X", "faction": "npc", "attacks": [{"name": "A", "type": "attack", "effects": [{"type": "explode"}]}]}]}',
    ],
)
def test_malformed_snapshot(text):
    with pytest.raises(MalformedSnapshotError):
        parse_session(text)
    fresh = load_session(text)
    assert fresh.participants == []
    assert fresh.current_round == 1


@pytest.mark.parametrize("text", [None, "", "   "])
def test_nothing_to_load(text):
    assert load_session(text) == CombatSession()


def test_file_round_trip(session, tmp_path):
    path = save_session_file(tmp_path / "saves" / "session.json", session)
    assert path.exists()
    assert load_session_file(path) == session


def test_missing_file_gives_fresh_session(tmp_path):
    assert load_session_file(tmp_path / "missing.json").participants == []


def test_damage_effect_values_survive(session):
    session.participants[1].attacks.append(
        Action(name="Club", type=ActionType.ATTACK, effects=[DamageEffect(value=13)])
    )
    restored = parse_session(dump_session(session))
    assert restored.participants[1].attacks[0].effects[0].value == 13


def _orc_with_effects(effects):
    return json.dumps(
        {
            "participants": [
                {
                    "id": "1",
                    "name": "Orc",
                    "faction": "npc",
                    "hpMax": 60,
                    "hpCurr": 35,
                    "ac": 13,
                    "abilities": [{"id": "a1", "name": "Howl", "type": "ability", "effects": effects}],
                },
                {"id": "2", "name": "Goblin", "faction": "npc", "hpMax": 7, "hpCurr": 7},
            ],
            "currentTurnIndex": 0,
            "currentRound": 1,
        }
    )


def test_status_effects_without_name_load():
    restored = load_session(
        _orc_with_effects([{"id": "e9", "type": "addStatus"}, {"id": "e10", "type": "removeStatus"}])
    )
    assert len(restored.participants) == 2
    effects = restored.participants[0].abilities[0].effects
    assert effects[0].status_name == ""
    assert effects[1].status_name == ""


@pytest.mark.parametrize("value, expected", [(7.5, 7), ("4", 4), (-2, 0), (None, 0), ("lots", 0)])
def test_fractional_effect_values_are_floored(value, expected):
    restored = load_session(_orc_with_effects([{"id": "e1", "type": "damage", "value": value}]))
    assert len(restored.participants) == 2
    assert restored.participants[0].abilities[0].effects[0].value == expected
