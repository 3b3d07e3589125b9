"""
Combatant display module for the tracker.

Formats one combatant as a single rich-markup line for the initiative list:
health and mana bars, the boss damage counter, mortality badges and statuses.
"""

from core.utils import make_bar

from .main import Combatant


def _mortality_badge(combatant: Combatant) -> str:
    if combatant.is_permanently_dead:
        return "[bold red]☠ DEAD FOREVER[/]"
    if combatant.is_dead:
        return "[red]☠ DEAD[/]"
    if combatant.is_unconscious:
        saves = combatant.death_saves
        counters = f" ✔{saves.successes} ✘{saves.failures}" if saves else ""
        return f"[yellow]UNCONSCIOUS{counters}[/]"
    return ""


def get_status_line(combatant: Combatant, show_all_statuses: bool = False) -> str:
    """
    Get a formatted status line for the combatant.

    Args:
        combatant (Combatant): The combatant to display.
        show_all_statuses (bool): Whether to show every status or truncate the list. Defaults to False.

    Returns:
        str: A rich-markup line with name, AC, health, mana, mortality and statuses.

    """
    name_width = min(max(len(combatant.name), 8), 16)
    line = f"{combatant.faction.emoji} [bold]{combatant.name:<{name_width}}[/] "
    line += f"| [yellow]AC:{combatant.armor_class:>2}[/] "

    # Bosses have no HP bar, only the accumulated damage.
    if combatant.is_boss:
        line += f"| [red]DMG:{combatant.damage_dealt:>4}[/] "
    else:
        ratio = combatant.hp_ratio()
        hp_color = "green" if ratio > 0.5 else "yellow" if ratio > 0.25 else "red"
        hp_bar = make_bar(combatant.hp_current, combatant.hp_max, length=8, color=hp_color)
        line += f"| [green]HP:{combatant.hp_current:>3}/{combatant.hp_max}[/]{hp_bar} "

    if combatant.mp_max > 0:
        mp_bar = make_bar(combatant.mp_current, combatant.mp_max, length=8, color="blue")
        line += f"| [blue]MP:{combatant.mp_current:>3}/{combatant.mp_max}[/]{mp_bar} "

    badge = "" if combatant.is_alive() else _mortality_badge(combatant)
    if badge:
        line += f"| {badge} "

    statuses = [
        f"[{'cyan' if s.is_from_equipment else 'magenta'}]{s.name}[/]({s.duration_label})"
        for s in combatant.statuses
    ]
    if statuses:
        if show_all_statuses or len(statuses) <= 3:
            line += f"| {' '.join(statuses)}"
        else:
            line += f"| {' '.join(statuses[:2])} [dim]+{len(statuses) - 2} more[/]"
    return line.rstrip()
