"""
Combatant module for the TTRPG combat tracker.

This module contains the Combatant record, its nested stats records and the
console status line.
"""

from .combatant_display import get_status_line
from .combatant_stats import CHARACTERISTICS, Characteristics, DeathSaves, get_stat_modifier
from .main import Combatant

__all__ = [
    "CHARACTERISTICS",
    "Characteristics",
    "Combatant",
    "DeathSaves",
    "get_stat_modifier",
    "get_status_line",
]
