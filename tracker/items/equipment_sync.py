"""
Equipment to status synchronization.

Whenever the equipment of a combatant changes, its status list is rebuilt
from scratch: every status that did not come from equipment is kept, and one
permanent status is derived for each bonus of each equipped item. The rebuild
is deterministic, so running it twice yields identical lists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from core.constants import EQUIPMENT_TAG, DurationType, EquipmentSlot, StatusOrigin
from effects.status import Status

from .equipment_item import EquipmentItem

if TYPE_CHECKING:
    from combatant.main import Combatant


def derive_item_statuses(item: EquipmentItem) -> list[Status]:
    """
    Builds the permanent statuses granted by one item.

    Args:
        item (EquipmentItem):
            The equipped item.

    Returns:
        list[Status]:
            One status per bonus template, with the composite id
            `<item id>-<bonus id>`.

    """
    derived: list[Status] = []
    for bonus in item.bonuses:
        description = f"{EQUIPMENT_TAG}: {item.name}] {bonus.description or ''}".rstrip()
        derived.append(
            Status(
                id=f"{item.id}-{bonus.id}",
                name=bonus.name,
                duration=bonus.duration,
                duration_type=DurationType.UNTIL_REMOVED,
                description=description,
                origin=StatusOrigin.EQUIPMENT,
                source_item_id=item.id,
            )
        )
    return derived


def derive_equipment_statuses(equipment: Mapping[EquipmentSlot, EquipmentItem]) -> list[Status]:
    """
    Builds the statuses granted by a whole equipment mapping, in slot
    declaration order and then bonus order.
    """
    derived: list[Status] = []
    for slot in EquipmentSlot:
        item = equipment.get(slot)
        if item is not None:
            derived.extend(derive_item_statuses(item))
    return derived


def sync_equipment_statuses(combatant: Combatant) -> None:
    """
    Recomputes the status list of a combatant from its equipment.

    Args:
        combatant (Combatant):
            The combatant to update in place.

    """
    combatant.statuses = combatant.manual_statuses() + derive_equipment_statuses(
        combatant.equipment
    )
