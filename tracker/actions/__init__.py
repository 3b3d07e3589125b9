"""
Actions module for the TTRPG combat tracker.

This module contains the Action record (attacks, abilities and spells) and
the closed set of effect variants an action applies to its targets.
"""

from .action import Action
from .action_effect import (
    ActionEffect,
    AddStatusEffect,
    BaseActionEffect,
    CustomDamageEffect,
    CustomHealEffect,
    DamageEffect,
    HealEffect,
    RemoveStatusEffect,
    RestoreMPEffect,
)

__all__ = [
    "Action",
    "ActionEffect",
    "AddStatusEffect",
    "BaseActionEffect",
    "CustomDamageEffect",
    "CustomHealEffect",
    "DamageEffect",
    "HealEffect",
    "RemoveStatusEffect",
    "RestoreMPEffect",
]
