"""
Items module for the TTRPG combat tracker.

This module contains the equipment item record and the synchronization that
turns equipped items into permanent statuses.
"""

from .equipment_item import EquipmentItem
from .equipment_sync import (
    derive_equipment_statuses,
    derive_item_statuses,
    sync_equipment_statuses,
)

__all__ = [
    "EquipmentItem",
    "derive_equipment_statuses",
    "derive_item_statuses",
    "sync_equipment_statuses",
]
