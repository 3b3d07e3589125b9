"""
Module for printing the initiative order, combatant sheets and the event log
in a formatted way.
"""

from combat.event_log import EventLog
from combat.session import CombatSession, current_participant, sorted_participants
from combatant.combatant_display import get_status_line
from combatant.combatant_stats import CHARACTERISTICS
from combatant.main import Combatant
from rich.padding import Padding

from core.utils import cprint, crule


def print_initiative_order(session: CombatSession) -> None:
    """
    Prints the roster in initiative order, marking the current combatant.

    Args:
        session (CombatSession): The session to display.

    """
    crule(f"Round {session.current_round}", style="bold cyan")
    current = current_participant(session)
    for combatant in sorted_participants(session):
        marker = "[bold green]▶[/]" if current is not None and combatant.id == current.id else " "
        cprint(f"{marker} [cyan]{combatant.initiative:>3}[/] {get_status_line(combatant)}")


def print_combatant_sheet(combatant: Combatant, padding: int = 2) -> None:
    """
    Prints the details of a combatant in a formatted way.

    Args:
        combatant (Combatant): The combatant to display.
        padding (int): Left padding for the output. Defaults to 2.

    """
    cprint(
        f"{combatant.faction.emoji} {combatant.colored_name}, "
        f"AC: [yellow]{combatant.armor_class}[/], Initiative: [cyan]{combatant.initiative}[/]"
    )
    scores = ", ".join(
        f"{name[:3].upper()}: {getattr(combatant.characteristics, name)} "
        f"({combatant.characteristics.modifier(name):+d})"
        for name in CHARACTERISTICS
    )
    cprint(Padding(scores, (0, padding)))
    for action in combatant.all_actions():
        sheet = f"{action.type.emoji} {action.colored_name}"
        if action.cooldown:
            status = "ready" if action.is_ready() else f"{action.current_cooldown} rounds left"
            sheet += f", cooldown {action.cooldown} ({status})"
        if action.has_custom_effects():
            sheet += ", [dim]values entered at the table[/]"
        if action.is_aoe:
            sheet += ", [bold]AOE[/]"
        effects = ", ".join(effect.describe() for effect in action.effects)
        if effects:
            sheet += f": {effects}"
        cprint(Padding(sheet, (0, padding)))
    for slot, item in combatant.equipment.items():
        cprint(Padding(f"[dim]{slot.display_name}[/]: {item.colored_name}", (0, padding)))


def print_event_log(log: EventLog, last: int | None = None) -> None:
    """
    Prints the event log, optionally only the most recent entries.

    Args:
        log (EventLog): The log to display.
        last (int | None): Number of most recent entries to show. Defaults to all.

    """
    entries = list(log)
    if last is not None:
        entries = entries[-last:]
    for entry in entries:
        cprint(f"{entry.type.emoji} {entry.colored_message}")
