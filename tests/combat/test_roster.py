"""
Tests for roster edits, quick HP adjustments, manual statuses and equipment.
"""

import math

import pytest
from actions.action import Action
from actions.action_effect import DamageEffect
from combat.roster import (
    add_participant,
    add_status,
    delete_action,
    equip_item,
    quick_damage,
    quick_heal,
    remove_participant,
    remove_status,
    save_action,
    set_armor_class,
    set_characteristic,
    set_hp_current,
    set_hp_max,
    set_initiative,
    set_mp_current,
    set_mp_max,
    unequip_item,
    update_participant,
    update_status,
)
from combat.session import CombatSession
from combatant.main import Combatant
from core.constants import ActionType, DurationType, EquipmentSlot, Faction, LogType, StatusOrigin
from effects.status import Status
from items.equipment_item import EquipmentItem


@pytest.fixture
def ranger():
    return Combatant(
        id="ranger",
        name="Ranger",
        faction=Faction.PLAYER,
        initiative=14,
        hp_max=30,
        hp_current=25,
        mp_max=10,
        mp_current=6,
    )


@pytest.fixture
def session(ranger):
    return CombatSession(
        participants=[
            ranger,
            Combatant(id="wolf", name="Wolf", faction=Faction.NPC, initiative=16, hp_max=11, hp_current=11),
            Combatant(id="troll", name="Troll", faction=Faction.BOSS, initiative=8, hp_max=84, hp_current=84),
        ]
    )


def test_add_participant():
    newcomer = Combatant(name="Bard", faction=Faction.PLAYER, hp_max=20, hp_current=20)
    updated = add_participant(CombatSession(), newcomer)
    assert [c.name for c in updated.participants] == ["Bard"]
    assert updated.event_log[-1].message == "Bard joined the battle"
    assert updated.event_log[-1].type == LogType.TURN


def test_remove_participant_clamps_turn_index(session):
    session.current_turn_index = 2
    updated = remove_participant(session, "troll")
    assert [c.id for c in updated.participants] == ["ranger", "wolf"]
    assert updated.current_turn_index == 1
    assert updated.event_log[-1].message == "Troll left the battle"


def test_remove_unknown_participant(session):
    updated = remove_participant(session, "nobody")
    assert len(updated.participants) == 3
    assert len(updated.event_log) == 0


def test_update_participant(session, ranger):
    edited = ranger.model_copy(update={"name": "Strider"})
    updated = update_participant(session, edited)
    assert updated.participants[0].name == "Strider"
    assert session.participants[0].name == "Ranger"


@pytest.mark.parametrize(
    "value, expected",
    [(40, 40), (0, 1), (-5, 1), ("12", 12), ("abc", 1), (math.nan, 1), (7.9, 7)],
)
def test_set_hp_max_clamps(session, value, expected):
    ranger = set_hp_max(session, "ranger", value).find("ranger")
    assert ranger.hp_max == expected
    assert ranger.hp_current <= ranger.hp_max


def test_lowering_hp_max_drags_current(session):
    ranger = set_hp_max(session, "ranger", 10).find("ranger")
    assert ranger.hp_current == 10


@pytest.mark.parametrize("value, expected", [(12, 12), (-3, 0), (99, 30), (None, 0)])
def test_set_hp_current_clamps(session, value, expected):
    assert set_hp_current(session, "ranger", value).find("ranger").hp_current == expected


def test_set_mp_clamps(session):
    updated = set_mp_current(session, "ranger", 50)
    assert updated.find("ranger").mp_current == 10
    updated = set_mp_max(updated, "ranger", -1)
    ranger = updated.find("ranger")
    assert ranger.mp_max == 0
    assert ranger.mp_current == 0


def test_set_armor_class_and_initiative(session):
    updated = set_armor_class(session, "ranger", -2)
    updated = set_initiative(updated, "ranger", -3)
    ranger = updated.find("ranger")
    assert ranger.armor_class == 0
    assert ranger.initiative == -3
    assert set_initiative(updated, "ranger", "fast").find("ranger").initiative == 0


def test_set_characteristic(session):
    updated = set_characteristic(session, "ranger", "dexterity", 18)
    assert updated.find("ranger").characteristics.dexterity == 18
    updated = set_characteristic(updated, "ranger", "dexterity", 99)
    assert updated.find("ranger").characteristics.dexterity == 30
    unchanged = set_characteristic(updated, "ranger", "luck", 5)
    assert unchanged.find("ranger").characteristics.dexterity == 30


def test_quick_damage_and_heal(session):
    updated = quick_damage(session, "ranger", 10)
    assert updated.find("ranger").hp_current == 15
    updated = quick_heal(updated, "ranger", 100)
    assert updated.find("ranger").hp_current == 30
    assert updated.event_log.messages() == ["Ranger takes 10 damage", "Ranger recovers 15 HP"]


def test_quick_damage_on_boss(session):
    updated = quick_damage(session, "troll", 20)
    updated = quick_heal(updated, "troll", 5)
    troll = updated.find("troll")
    assert troll.damage_dealt == 15
    assert troll.hp_current == 84


def test_quick_damage_negative_amount(session):
    updated = quick_damage(session, "ranger", -10)
    assert updated.find("ranger").hp_current == 25


def test_manual_statuses(session):
    blessed = Status(name="Blessed", duration=3)
    updated = add_status(session, "ranger", blessed)
    assert updated.event_log[-1].message == 'Ranger gains status "Blessed"'
    updated = remove_status(updated, "ranger", blessed.id)
    assert updated.find("ranger").statuses == []
    assert updated.event_log[-1].message == 'Ranger loses status "Blessed"'


def test_update_status_in_place(session):
    session = add_status(session, "ranger", Status(id="mark", name="Hunter's Mark"))
    session = add_status(session, "ranger", Status(id="bless", name="Blessed", duration=3))
    edited = Status(id="mark", name="Hunter's Mark", duration=5, duration_type=DurationType.TURNS)
    updated = update_status(session, "ranger", edited)
    statuses = updated.find("ranger").statuses
    assert [s.id for s in statuses] == ["mark", "bless"]
    assert statuses[0].duration == 5
    assert statuses[0].duration_type == DurationType.TURNS
    assert session.find("ranger").statuses[0].duration == 1


def test_update_unknown_status(session):
    updated = update_status(session, "ranger", Status(id="ghost", name="Ghostly"))
    assert updated.find("ranger").statuses == []


def test_save_action_appends_then_replaces(session):
    volley = Action(id="volley", name="Volley", type=ActionType.ATTACK, effects=[DamageEffect(value=6)])
    updated = save_action(session, "ranger", volley)
    updated = save_action(updated, "ranger", Action(id="dash", name="Dash", type=ActionType.ABILITY))
    ranger = updated.find("ranger")
    assert [a.id for a in ranger.attacks] == ["volley"]
    assert [a.id for a in ranger.abilities] == ["dash"]

    stronger = Action(id="volley", name="Volley", type=ActionType.ATTACK, effects=[DamageEffect(value=9)])
    updated = save_action(updated, "ranger", stronger)
    attacks = updated.find("ranger").attacks
    assert len(attacks) == 1
    assert attacks[0].effects[0].value == 9
    assert session.find("ranger").attacks == []


def test_delete_action(session):
    session = save_action(session, "ranger", Action(id="volley", name="Volley", type=ActionType.ATTACK))
    session = save_action(session, "ranger", Action(id="stab", name="Stab", type=ActionType.ATTACK))
    updated = delete_action(session, "ranger", ActionType.ATTACK, "volley")
    assert [a.id for a in updated.find("ranger").attacks] == ["stab"]
    # Wrong category or unknown id leaves the lists alone.
    updated = delete_action(updated, "ranger", ActionType.SPELL, "stab")
    updated = delete_action(updated, "ranger", ActionType.ATTACK, "missing")
    assert [a.id for a in updated.find("ranger").attacks] == ["stab"]


def test_action_edits_on_unknown_combatant(session):
    updated = save_action(session, "ghost", Action(name="Boo", type=ActionType.SPELL))
    assert updated == session


def test_equip_and_unequip(session):
    cloak = EquipmentItem(
        id="cloak",
        name="Elven Cloak",
        slot=EquipmentSlot.ACCESSORY1,
        bonuses=[Status(id="stealth", name="Stealthy", description="Advantage on stealth")],
    )
    session = add_status(session, "ranger", Status(name="Hunter's Mark"))
    updated = equip_item(session, "ranger", EquipmentSlot.CHEST, cloak)
    ranger = updated.find("ranger")
    assert ranger.equipment[EquipmentSlot.CHEST].slot == EquipmentSlot.CHEST
    assert [s.name for s in ranger.statuses] == ["Hunter's Mark", "Stealthy"]
    derived = ranger.statuses[1]
    assert derived.id == "cloak-stealth"
    assert derived.origin == StatusOrigin.EQUIPMENT
    assert "Elven Cloak" in derived.description

    updated = unequip_item(updated, "ranger", EquipmentSlot.CHEST)
    ranger = updated.find("ranger")
    assert ranger.equipment == {}
    assert [s.name for s in ranger.statuses] == ["Hunter's Mark"]


def test_unequip_empty_slot(session):
    updated = unequip_item(session, "ranger", EquipmentSlot.HEAD)
    assert updated.find("ranger").statuses == []
