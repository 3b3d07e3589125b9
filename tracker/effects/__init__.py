"""
Status system module for the TTRPG combat tracker.

This module contains the Status record and the clock that consumes status
durations and action cooldowns at turn and round boundaries.
"""

from .status import Status
from .status_clock import (
    clear_temporary_statuses,
    reset_cooldowns,
    round_tick,
    tick_cooldowns,
    tick_statuses,
    turn_tick,
)

__all__ = [
    "Status",
    "clear_temporary_statuses",
    "reset_cooldowns",
    "round_tick",
    "tick_cooldowns",
    "tick_statuses",
    "turn_tick",
]
