"""
Tests for the combatant record and its status line.
"""

import pytest
from actions.action import Action
from actions.action_effect import CustomDamageEffect, CustomHealEffect, DamageEffect
from combatant.combatant_display import get_status_line
from combatant.combatant_stats import Characteristics, DeathSaves, get_stat_modifier
from combatant.main import Combatant
from core.constants import ActionType, EffectType, EquipmentSlot, Faction
from core.utils import ccapture
from effects.status import Status
from items.equipment_item import EquipmentItem


@pytest.fixture
def druid():
    return Combatant(
        name="Druid",
        faction=Faction.PLAYER,
        hp_max=30,
        hp_current=12,
        mp_max=20,
        mp_current=20,
        attacks=[Action(id="claw", name="Claw", type=ActionType.ATTACK, effects=[DamageEffect(value=4)])],
        spells=[Action(id="thorns", name="Thorn Whip", type=ActionType.SPELL)],
        statuses=[Status(name="Wild Shape", duration=5)],
    )


def test_invariants_are_corrected():
    """Out-of-range resources are clamped on load."""
    combatant = Combatant(
        name="Broken",
        faction=Faction.NPC,
        hp_max=0,
        hp_current=50,
        mp_max=-4,
        mp_current=3,
        damage_dealt=-1,
    )
    assert combatant.hp_max == 1
    assert combatant.hp_current == 1
    assert combatant.mp_max == 0
    assert combatant.mp_current == 0
    assert combatant.damage_dealt == 0


def test_legacy_field_names():
    combatant = Combatant.model_validate(
        {"name": "Old", "faction": "npc", "hpMax": 20, "hpCurr": 15, "mpMax": 5, "mpCurr": 4, "ac": 13}
    )
    assert (combatant.hp_current, combatant.mp_current, combatant.armor_class) == (15, 4, 13)
    dumped = combatant.to_dict()
    assert dumped["hpCurrent"] == 15
    assert dumped["armorClass"] == 13
    assert "hpCurr" not in dumped


def test_equipment_slot_mismatch_fixed():
    ring = EquipmentItem(name="Ring", slot=EquipmentSlot.ACCESSORY1)
    combatant = Combatant(name="Ringbearer", faction=Faction.PLAYER, equipment={EquipmentSlot.ACCESSORY2: ring})
    assert combatant.equipment[EquipmentSlot.ACCESSORY2].slot == EquipmentSlot.ACCESSORY2


def test_find_action(druid):
    assert druid.find_action("claw").name == "Claw"
    assert druid.find_action("claw", ActionType.SPELL) is None
    assert druid.find_action("thorns", ActionType.SPELL).name == "Thorn Whip"
    assert [a.id for a in druid.all_actions()] == ["claw", "thorns"]


def test_has_status_case_insensitive(druid):
    assert druid.has_status("wild shape")
    assert not druid.has_status("Rage")


def test_stat_modifiers():
    assert get_stat_modifier(10) == 0
    assert get_stat_modifier(15) == 2
    assert get_stat_modifier(8) == -1
    assert Characteristics(wisdom=18).modifier("wisdom") == 4
    with pytest.raises(ValueError):
        Characteristics().modifier("luck")


def test_death_saves_clamped():
    saves = DeathSaves(successes=5, failures=-1)
    assert (saves.successes, saves.failures) == (3, 0)


def test_status_line(druid):
    line = get_status_line(druid)
    assert "Druid" in line
    assert "HP: 12/30" in line
    assert "MP: 20/20" in line
    assert "Wild Shape" in line


def test_status_line_renders_without_markup(druid):
    rendered = ccapture(get_status_line(druid))
    assert "[green]" not in rendered
    assert "[/]" not in rendered
    assert "HP: 12/30" in rendered
    assert "▮" in rendered


def test_status_line_boss_and_unconscious():
    boss = Combatant(name="Hydra", faction=Faction.BOSS, hp_max=200, hp_current=200, damage_dealt=75)
    line = get_status_line(boss)
    assert "DMG:  75" in line
    assert "HP:" not in line

    downed = Combatant(
        name="Squire",
        faction=Faction.PLAYER,
        hp_max=10,
        hp_current=0,
        is_unconscious=True,
        death_saves=DeathSaves(successes=1, failures=2),
    )
    assert "UNCONSCIOUS ✔1 ✘2" in get_status_line(downed)


def test_action_helpers():
    action = Action(name="Improvise", type=ActionType.ABILITY, cooldown=2, effects=[CustomDamageEffect()])
    assert action.is_ready()
    assert action.has_custom_effects()
    assert Action(name="Mend", type=ActionType.SPELL, effects=[CustomHealEffect()]).has_custom_effects()
    assert not Action(name="Jab", type=ActionType.ATTACK, effects=[DamageEffect(value=1)]).has_custom_effects()
    assert action.effects[0].effect_type == EffectType.CUSTOM_DAMAGE
    action.start_cooldown()
    assert not action.is_ready()
    action.tick_cooldown()
    action.tick_cooldown()
    action.tick_cooldown()
    assert action.current_cooldown == 0


def test_alive_and_hp_ratio(druid):
    assert druid.is_alive()
    assert druid.hp_ratio() == pytest.approx(0.4)
    druid.is_unconscious = True
    assert not druid.is_alive()
