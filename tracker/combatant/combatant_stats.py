"""
Combatant stats module for the tracker.

Holds the smaller records nested in a combatant: the six characteristic
scores and the death-save counters.
"""

from typing import Any

from core.constants import DEATH_SAVE_LIMIT
from core.models import TrackerModel
from pydantic import Field

CHARACTERISTICS = (
    "strength",
    "dexterity",
    "constitution",
    "intelligence",
    "wisdom",
    "charisma",
)


def get_stat_modifier(score: int) -> int:
    """
    Calculates the D&D ability score modifier.

    Args:
        score (int): The ability score.

    Returns:
        int: The modifier for the given ability score.

    """
    return (score - 10) // 2


class Characteristics(TrackerModel):
    """The six characteristic scores of a combatant."""

    strength: int = Field(default=10, description="Strength score.")
    dexterity: int = Field(default=10, description="Dexterity score.")
    constitution: int = Field(default=10, description="Constitution score.")
    intelligence: int = Field(default=10, description="Intelligence score.")
    wisdom: int = Field(default=10, description="Wisdom score.")
    charisma: int = Field(default=10, description="Charisma score.")

    def modifier(self, name: str) -> int:
        """
        Returns the modifier of the given characteristic.

        Args:
            name (str):
                One of the six characteristic names.

        Returns:
            int:
                The D&D modifier of the score.

        """
        if name not in CHARACTERISTICS:
            raise ValueError(f"Unknown characteristic '{name}'.")
        return get_stat_modifier(getattr(self, name))


class DeathSaves(TrackerModel):
    """Success and failure counters of an unconscious player."""

    successes: int = Field(
        default=0,
        description=f"Recorded successes, between 0 and {DEATH_SAVE_LIMIT}.",
    )
    failures: int = Field(
        default=0,
        description=f"Recorded failures, between 0 and {DEATH_SAVE_LIMIT}.",
    )

    def model_post_init(self, _: Any) -> None:
        """Clamp the counters into their valid range."""
        self.successes = min(DEATH_SAVE_LIMIT, max(0, self.successes))
        self.failures = min(DEATH_SAVE_LIMIT, max(0, self.failures))
