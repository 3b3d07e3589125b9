"""
Status module for the tracker.

Defines the Status record: a timed or permanent modifier attached to a
combatant, either applied by hand or by an action, or derived from an
equipped item.
"""

from typing import Any

from core.constants import (
    DEFAULT_STATUS_DURATION,
    LEGACY_EQUIPMENT_TAGS,
    DurationType,
    StatusOrigin,
)
from core.models import TrackerModel
from core.utils import new_id
from pydantic import Field, model_validator


class Status(TrackerModel):
    """
    A named modifier attached to a combatant.

    The meaning of `duration` depends on `duration_type`: rounds are consumed
    by round ticks, turns by turn ticks, and untilRemoved statuses never
    expire on their own.
    """

    id: str = Field(
        default_factory=new_id,
        description="Unique identifier of this status instance.",
    )
    name: str = Field(
        description="The name of the status.",
    )
    duration: int = Field(
        default=DEFAULT_STATUS_DURATION,
        description="Remaining duration, counted in units of duration_type.",
    )
    duration_type: DurationType = Field(
        default=DurationType.ROUNDS,
        description="Which clock tick consumes the duration.",
    )
    description: str | None = Field(
        default=None,
        description="Optional free-text description.",
    )
    origin: StatusOrigin = Field(
        default=StatusOrigin.MANUAL,
        description="Whether the status was applied directly or derived from equipment.",
    )
    source_item_id: str | None = Field(
        default=None,
        description="Id of the equipment item this status was derived from.",
    )

    @model_validator(mode="before")
    @classmethod
    def _detect_legacy_equipment_origin(cls, data: Any) -> Any:
        """
        Older saves marked equipment statuses only through a description
        prefix. Translate that convention into an explicit origin.
        """
        if isinstance(data, dict) and "origin" not in data:
            description = data.get("description") or ""
            if isinstance(description, str) and description.startswith(LEGACY_EQUIPMENT_TAGS):
                data = {**data, "origin": StatusOrigin.EQUIPMENT.value}
        return data

    @property
    def is_permanent(self) -> bool:
        """True if the status is never removed by the clock."""
        return self.duration_type == DurationType.UNTIL_REMOVED

    @property
    def is_expired(self) -> bool:
        """True if the clock should drop this status."""
        return not self.is_permanent and self.duration <= 0

    @property
    def is_from_equipment(self) -> bool:
        """True if the status was derived from an equipped item."""
        return self.origin == StatusOrigin.EQUIPMENT

    @property
    def duration_label(self) -> str:
        """Returns a compact duration label, e.g. '3r', '2t' or '∞'."""
        if self.is_permanent:
            return DurationType.UNTIL_REMOVED.short_name
        return f"{self.duration}{self.duration_type.short_name}"

    def matches_name(self, name: str) -> bool:
        """Case-insensitive comparison of the status name."""
        return self.name.lower() == name.lower()
