"""
Equipment item module for the tracker.

Defines the EquipmentItem record. An item occupies one of the fixed equipment
slots and carries status templates that become permanent statuses on the
combatant wearing it.
"""

from core.constants import EquipmentSlot
from core.models import TrackerModel
from core.utils import new_id
from effects.status import Status
from pydantic import Field


class EquipmentItem(TrackerModel):
    """
    A piece of equipment worn in one slot.

    The bonuses are templates: equipping the item derives one untilRemoved
    status per bonus, see items.equipment_sync.
    """

    id: str = Field(
        default_factory=new_id,
        description="Unique identifier of the item.",
    )
    name: str = Field(
        description="The name of the item.",
    )
    slot: EquipmentSlot = Field(
        description="The slot the item is equipped in.",
    )
    description: str | None = Field(
        default=None,
        description="Optional free-text description.",
    )
    bonuses: list[Status] = Field(
        default_factory=list,
        description="Status templates granted while the item is equipped.",
    )

    @property
    def colored_name(self) -> str:
        return f"[bold yellow]{self.name}[/]"
