"""
Core system module for the TTRPG combat tracker.

This module contains the fundamental components shared by the engine,
including enumerations and rule constants, the error taxonomy, logging
setup, numeric input validation and the console helpers.
"""

from .constants import (
    CRIT_DAMAGE_MULTIPLIER,
    DEATH_SAVE_LIMIT,
    DEFAULT_STATUS_DURATION,
    EQUIPMENT_TAG,
    ActionType,
    DurationType,
    EffectType,
    EquipmentSlot,
    Faction,
    HitCheck,
    LogType,
    StatusOrigin,
)
from .errors import (
    EmptyRosterError,
    InvalidNumericInputError,
    MalformedSnapshotError,
    TrackerError,
    UnknownEffectTargetError,
)
from .models import TrackerModel
from .utils import (
    ccapture,
    cprint,
    crule,
    make_bar,
    new_id,
    now_ms,
)
from .validation import (
    coerce_number,
    ensure_int_in_range,
    ensure_non_negative_int,
    require_non_negative_number,
)

__all__ = [
    # Import from constants.py
    "CRIT_DAMAGE_MULTIPLIER",
    "DEATH_SAVE_LIMIT",
    "DEFAULT_STATUS_DURATION",
    "EQUIPMENT_TAG",
    "ActionType",
    "DurationType",
    "EffectType",
    "EquipmentSlot",
    "Faction",
    "HitCheck",
    "LogType",
    "StatusOrigin",
    # Import from errors.py
    "EmptyRosterError",
    "InvalidNumericInputError",
    "MalformedSnapshotError",
    "TrackerError",
    "UnknownEffectTargetError",
    # Import from models.py
    "TrackerModel",
    # Import from utils.py
    "ccapture",
    "cprint",
    "crule",
    "make_bar",
    "new_id",
    "now_ms",
    # Import from validation.py
    "coerce_number",
    "ensure_int_in_range",
    "ensure_non_negative_int",
    "require_non_negative_number",
]
