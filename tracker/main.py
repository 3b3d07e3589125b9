"""
Main entry point for the TTRPG Combat Tracker demo.

This script loads the demo encounter from the data folder and drives a short
scripted fight through the engine, printing the initiative order and the
event log as it goes. It demonstrates:
- Turn and round sequencing with status and cooldown ticks
- Resolving actions with hit verdicts, critical hits and custom values
- Player unconsciousness, death saves and NPC deaths
- Equipment bonuses synchronized into statuses
- Short and long rests
- Saving the encounter into the save catalog
"""

import logging
from pathlib import Path

from actions.action import Action
from actions.action_effect import CustomDamageEffect
from combat import (
    CombatSession,
    advance_turn,
    equip_item,
    long_rest,
    quick_heal,
    record_death_save_success,
    resolve_action,
    short_rest,
)
from core.constants import ActionType, EquipmentSlot, HitCheck
from core.logging import setup_logging
from core.sheets import print_combatant_sheet, print_event_log, print_initiative_order
from core.utils import cprint, crule
from effects.status import Status
from items.equipment_item import EquipmentItem
from persistence import SaveCatalog, create_save, dump_catalog, load_session_file

setup_logging(logging.INFO)

# Get the path to the data folder.
data_dir = Path(__file__).parent / "data"

crule("Combat Tracker", style="bold green")

cprint(
    "Welcome to the Combat Tracker! The engine keeps the initiative order, "
    "applies the actions you resolve at the table and keeps an audit trail "
    "of everything that happened.\n",
    style="bold blue",
)

# =============================================================================

crule("Load Encounter", style="bold green")

session: CombatSession = load_session_file(data_dir / "demo_session.json")
for combatant in session.participants:
    crule(f"{combatant.faction.display_name}: {combatant.name}", style="bold", characters="-")
    print_combatant_sheet(combatant)


def use(session: CombatSession, caster_id: str, action_id: str, action_type: ActionType, *args, **kwargs) -> CombatSession:
    """Resolves an action owned by the caster."""
    caster = session.find(caster_id)
    assert caster is not None, f"Unknown caster {caster_id}."
    action = caster.find_action(action_id, action_type)
    assert action is not None, f"{caster.name} has no action {action_id}."
    return resolve_action(session, caster_id, action, *args, **kwargs)


# =============================================================================

crule("Fight", style="bold green")

print_initiative_order(session)

# Balrog opens with a critical hit on Aragorn.
session = use(
    session, "balrog", "flame-sword", ActionType.ATTACK, {"aragorn"},
    hit_checks={"aragorn": HitCheck.CRIT_SUCCESS},
)
session = advance_turn(session)

# Aragorn puts on a helm before swinging at the Balrog and the orc.
helm = EquipmentItem(
    name="Helm of Vigilance",
    slot=EquipmentSlot.HEAD,
    bonuses=[Status(name="Vigilant", description="+1 AC")],
)
session = equip_item(session, "aragorn", EquipmentSlot.HEAD, helm)
session = use(
    session, "aragorn", "sword-strike", ActionType.ATTACK, {"balrog", "orc-warrior"},
    hit_checks={"orc-warrior": HitCheck.FAIL},
)
session = advance_turn(session)

# Gandalf casts fireball on both enemies.
session = use(session, "gandalf", "fireball", ActionType.SPELL, {"balrog", "orc-warrior"})
session = advance_turn(session)

# The orc knocks Aragorn out.
session = use(session, "orc-warrior", "greataxe", ActionType.ATTACK, {"aragorn"})
print_initiative_order(session)

# Aragorn rolls two successful death saves before Gandalf heals him.
session = record_death_save_success(session, "aragorn")
session = record_death_save_success(session, "aragorn")
session = quick_heal(session, "aragorn", 15)

# A one-off improvised action with a manually entered damage value.
smite = Action(
    name="Improvised Smite",
    type=ActionType.SPELL,
    effects=[CustomDamageEffect(id="smite-damage")],
)
session = resolve_action(session, "gandalf", smite, {"orc-warrior"}, custom_values={"smite-damage": 8})

for _ in range(len(session.participants)):
    session = advance_turn(session)
print_initiative_order(session)

# =============================================================================

crule("Rest", style="bold green")

session = short_rest(session)
print_initiative_order(session)
session = long_rest(session)
print_initiative_order(session)

catalog, session = create_save(SaveCatalog(), session, "After the bridge", "Demo encounter")
cprint(f"Save catalog holds {len(catalog)} save(s), {len(dump_catalog(catalog))} characters of JSON.")

# =============================================================================

crule("Event Log", style="bold green")

print_event_log(session.event_log)
