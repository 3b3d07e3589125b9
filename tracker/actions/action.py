"""
Action module for the tracker.

Defines the Action record: an attack, ability or spell owned by a combatant,
with its cooldown bookkeeping and the ordered list of effects it applies.
"""

from typing import Any

from core.constants import ActionType
from core.models import TrackerModel
from core.utils import new_id
from pydantic import Field

from .action_effect import ActionEffect, CustomDamageEffect, CustomHealEffect


class Action(TrackerModel):
    """
    An attack, ability or spell.

    The category is only a tag: all three kinds share the same shape and are
    resolved the same way. `cooldown` is the number of rounds before the
    action can be used again and `current_cooldown` the rounds remaining.
    """

    id: str = Field(
        default_factory=new_id,
        description="Unique identifier of the action.",
    )
    name: str = Field(
        description="The name of the action.",
    )
    type: ActionType = Field(
        description="The category list this action belongs to.",
    )
    cooldown: int = Field(
        default=0,
        description="Rounds before the action is reusable, 0 for no cooldown.",
    )
    current_cooldown: int = Field(
        default=0,
        description="Rounds remaining before the action is ready, 0 when ready.",
    )
    is_aoe: bool = Field(
        default=False,
        alias="isAOE",
        description="Whether the action is meant to hit several targets.",
    )
    description: str | None = Field(
        default=None,
        description="Optional free-text description.",
    )
    effects: list[ActionEffect] = Field(
        default_factory=list,
        description="The effects applied to each target, in order.",
    )

    def model_post_init(self, _: Any) -> None:
        """Clamp cooldown counters to non-negative values."""
        self.cooldown = max(0, self.cooldown)
        self.current_cooldown = max(0, self.current_cooldown)

    @property
    def colored_name(self) -> str:
        """Returns the action name colored by its category."""
        return self.type.colorize(self.name)

    def is_ready(self) -> bool:
        """True if the action is not on cooldown."""
        return self.current_cooldown <= 0

    def start_cooldown(self) -> None:
        """Put the action on cooldown after it has been used."""
        if self.cooldown > 0:
            self.current_cooldown = self.cooldown

    def tick_cooldown(self) -> None:
        """Consume one round of cooldown."""
        self.current_cooldown = max(0, self.current_cooldown - 1)

    def has_custom_effects(self) -> bool:
        """True if applying this action needs manually entered values."""
        return any(isinstance(e, (CustomDamageEffect, CustomHealEffect)) for e in self.effects)
