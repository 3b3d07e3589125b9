"""
Action effect module for the tracker.

Defines the closed set of effect variants an action can carry. Each variant
is its own model discriminated by the `type` key, so loading a save produces
the right class and the resolver can dispatch on it exhaustively.
"""

import math
from typing import Annotated, Any, Literal, Union

from core.constants import DEFAULT_STATUS_DURATION, DurationType, EffectType
from core.models import TrackerModel
from core.utils import new_id
from core.validation import coerce_number
from pydantic import Field, field_validator


class BaseActionEffect(TrackerModel):
    """Fields shared by every effect variant."""

    id: str = Field(
        default_factory=new_id,
        description="Unique identifier, also the key of custom values.",
    )

    @property
    def effect_type(self) -> EffectType:
        """Returns the enumerated type of the effect."""
        return EffectType(getattr(self, "type"))

    def describe(self) -> str:
        """Returns a short human-readable summary of the effect."""
        raise NotImplementedError("Subclasses must implement describe.")


class FixedValueEffect(BaseActionEffect):
    """
    Base of the effects carrying a fixed amount.

    Saves may hold fractional or textual amounts; they are floored to a
    non-negative integer on load, and unusable values become 0.
    """

    value: int = Field(
        default=0,
        description="The amount applied to each target.",
    )

    @field_validator("value", mode="before")
    @classmethod
    def _floor_value(cls, value: Any) -> int:
        number = coerce_number(value)
        if number is None:
            return 0
        return max(0, math.floor(number))


class DamageEffect(FixedValueEffect):
    """Deals a fixed amount of damage."""

    type: Literal["damage"] = "damage"

    def describe(self) -> str:
        return f"{self.value} damage"


class HealEffect(FixedValueEffect):
    """Heals a fixed amount of HP (or reduces a boss damage counter)."""

    type: Literal["heal"] = "heal"

    def describe(self) -> str:
        return f"+{self.value} HP"


class RestoreMPEffect(FixedValueEffect):
    """Restores a fixed amount of MP."""

    type: Literal["restoreMP"] = "restoreMP"

    def describe(self) -> str:
        return f"+{self.value} MP"


class AddStatusEffect(BaseActionEffect):
    """Applies a new status to the target."""

    type: Literal["addStatus"] = "addStatus"
    status_name: str = Field(
        default="",
        description="Name of the status to apply, empty for none.",
    )
    status_duration: int = Field(
        default=DEFAULT_STATUS_DURATION,
        description="Duration of the applied status.",
    )
    status_duration_type: DurationType = Field(
        default=DurationType.ROUNDS,
        description="Which clock tick consumes the applied status.",
    )
    status_description: str | None = Field(
        default=None,
        description="Optional description copied to the applied status.",
    )

    def describe(self) -> str:
        if self.status_duration_type == DurationType.UNTIL_REMOVED:
            return f"Apply: {self.status_name} (until removed)"
        return f"Apply: {self.status_name} ({self.status_duration} {self.status_duration_type.value})"


class RemoveStatusEffect(BaseActionEffect):
    """Removes every status with the given name (case-insensitive)."""

    type: Literal["removeStatus"] = "removeStatus"
    status_name: str = Field(
        default="",
        description="Name of the status to remove, empty for none.",
    )

    def describe(self) -> str:
        return f"Remove: {self.status_name}"


class CustomDamageEffect(BaseActionEffect):
    """Deals damage whose amount is entered when the action is applied."""

    type: Literal["customDamage"] = "customDamage"

    def describe(self) -> str:
        return "Damage (entered manually)"


class CustomHealEffect(BaseActionEffect):
    """Heals an amount entered when the action is applied."""

    type: Literal["customHeal"] = "customHeal"

    def describe(self) -> str:
        return "Healing (entered manually)"


ActionEffect = Annotated[
    Union[
        DamageEffect,
        HealEffect,
        RestoreMPEffect,
        AddStatusEffect,
        RemoveStatusEffect,
        CustomDamageEffect,
        CustomHealEffect,
    ],
    Field(discriminator="type"),
]
