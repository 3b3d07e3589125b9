"""
Rest protocol.

Short and long rests restore resources for the whole roster according to a
pair of percentage presets.
"""

from catchery import log_debug
from core.constants import ActionType, LogType
from core.models import TrackerModel
from effects.status_clock import reset_cooldowns
from pydantic import Field

from .session import CombatSession


class RestPreset(TrackerModel):
    """Percentages of the maximum HP and MP restored by a rest."""

    hp_percent: int = Field(
        default=100,
        ge=0,
        le=100,
        description="Percentage of the maximum HP restored.",
    )
    mp_percent: int = Field(
        default=100,
        ge=0,
        le=100,
        description="Percentage of the maximum MP restored.",
    )


class RestSettings(TrackerModel):
    """The presets used by short and long rests."""

    short_rest: RestPreset = Field(
        default_factory=lambda: RestPreset(hp_percent=50, mp_percent=50),
        description="Preset of the short rest (additive restore).",
    )
    long_rest: RestPreset = Field(
        default_factory=lambda: RestPreset(hp_percent=100, mp_percent=100),
        description="Preset of the long rest (absolute set).",
    )


def _portion(maximum: int, percent: int) -> int:
    return maximum * percent // 100


def short_rest(session: CombatSession, settings: RestSettings | None = None) -> CombatSession:
    """
    Applies a short rest to every combatant.

    HP and MP go up by a share of their maximum, capped at the maximum.
    Abilities with a cooldown of at most one round become ready again.
    Statuses and mortality flags are not touched.

    Args:
        session (CombatSession):
            The current session, left untouched.
        settings (RestSettings | None):
            The rest presets, defaults when omitted.

    Returns:
        CombatSession:
            The rested session.

    """
    preset = (settings or RestSettings()).short_rest
    updated = session.updated()
    for combatant in updated.participants:
        combatant.hp_current = min(
            combatant.hp_max,
            combatant.hp_current + _portion(combatant.hp_max, preset.hp_percent),
        )
        combatant.mp_current = min(
            combatant.mp_max,
            combatant.mp_current + _portion(combatant.mp_max, preset.mp_percent),
        )
        for ability in combatant.actions_for(ActionType.ABILITY):
            if ability.cooldown <= 1:
                ability.current_cooldown = 0
    updated.log("Short rest completed", LogType.REST)
    return updated


def long_rest(session: CombatSession, settings: RestSettings | None = None) -> CombatSession:
    """
    Applies a long rest to every combatant.

    HP and MP are set to a share of their maximum, every status is removed,
    the dead and unconscious flags and the death saves are cleared, and every
    cooldown is reset. Permanently dead combatants stay dead at 0 HP.
    """
    preset = (settings or RestSettings()).long_rest
    updated = session.updated()
    for combatant in updated.participants:
        combatant.statuses = []
        reset_cooldowns(combatant.all_actions())
        combatant.mp_current = _portion(combatant.mp_max, preset.mp_percent)
        combatant.death_saves = None
        combatant.is_unconscious = False
        if combatant.is_permanently_dead:
            log_debug(f"{combatant.name} is permanently dead, skipping HP restore.")
            combatant.hp_current = 0
            combatant.is_dead = True
            continue
        combatant.hp_current = _portion(combatant.hp_max, preset.hp_percent)
        combatant.is_dead = False
    updated.log("Long rest completed", LogType.REST)
    return updated
