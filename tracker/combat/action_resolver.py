"""
Action effect resolver.

Applies one use of an action: the caster's cooldown is started, then every
selected target is resolved independently under its hit verdict. A missed
target receives nothing, a critical success doubles damage (never healing),
and every consequence is written to the event log.
"""

import math
from typing import Any, Iterable, Mapping

from actions.action import Action
from actions.action_effect import (
    ActionEffect,
    AddStatusEffect,
    CustomDamageEffect,
    CustomHealEffect,
    DamageEffect,
    HealEffect,
    RemoveStatusEffect,
    RestoreMPEffect,
)
from catchery import log_debug, log_warning
from combatant.main import Combatant
from core.constants import (
    CRIT_DAMAGE_MULTIPLIER,
    DEFAULT_STATUS_DURATION,
    HitCheck,
    LogType,
)
from core.errors import InvalidNumericInputError, UnknownEffectTargetError
from core.validation import require_non_negative_number
from effects.status import Status
from typing_extensions import assert_never

from .event_log import EventLog, EventLogEntry
from .mortality import on_hp_reduced, on_hp_restored
from .session import CombatSession


# ============================================================================
# HP AND DAMAGE COUNTER CHANGES
# ============================================================================


def apply_damage(
    target: Combatant,
    amount: int,
    log: EventLog,
    source: str | None = None,
    critical: bool = False,
) -> None:
    """
    Deals damage to a combatant.

    Bosses accumulate the damage in their counter. Everyone else loses HP,
    floored at zero, which may trigger a mortality transition.

    Args:
        target (Combatant):
            The combatant taking the damage.
        amount (int):
            The final amount, after any critical multiplier.
        log (EventLog):
            The log receiving the damage entry.
        source (str | None):
            Name of the action dealing the damage, if any.
        critical (bool):
            Whether the damage comes from a critical success.

    """
    amount = max(0, amount)
    message = f"{target.name} takes {amount} damage"
    if source:
        message += f" from {source}"
    if critical:
        message += " (CRIT!)"

    if target.is_boss:
        target.damage_dealt += amount
        log.add(message, LogType.DAMAGE)
        return

    target.hp_current = max(0, target.hp_current - amount)
    log.add(message, LogType.DAMAGE)
    on_hp_reduced(target, log)


def apply_healing(
    target: Combatant,
    amount: int,
    log: EventLog,
    source: str | None = None,
) -> None:
    """
    Heals a combatant.

    Bosses have their damage counter reduced, floored at zero. Everyone else
    regains HP up to the maximum, which wakes up an unconscious player.
    """
    amount = max(0, amount)
    if target.is_boss:
        previous = target.damage_dealt
        target.damage_dealt = max(0, previous - amount)
        log.add(
            f"{target.name}: damage reduced by {previous - target.damage_dealt} (healing)",
            LogType.HEAL,
        )
        return

    previous = target.hp_current
    target.hp_current = min(target.hp_max, target.hp_current + amount)
    message = f"{target.name} recovers {target.hp_current - previous} HP"
    if source:
        message += f" from {source}"
    log.add(message, LogType.HEAL)
    on_hp_restored(target, log)


def restore_mp(target: Combatant, amount: int, log: EventLog, source: str | None = None) -> None:
    """Restores MP up to the maximum."""
    previous = target.mp_current
    target.mp_current = min(target.mp_max, target.mp_current + max(0, amount))
    message = f"{target.name} recovers {target.mp_current - previous} MP"
    if source:
        message += f" from {source}"
    log.add(message, LogType.HEAL)


# ============================================================================
# EFFECT APPLICATION
# ============================================================================


def resolve_custom_value(custom_values: Mapping[str, Any], effect_id: str) -> int:
    """
    Looks up the manually entered value of a custom effect.

    Missing values count as zero. Negative, NaN and non-numeric values are
    clamped to zero.
    """
    raw = custom_values.get(effect_id, 0)
    try:
        return math.floor(require_non_negative_number(raw, "custom effect value"))
    except InvalidNumericInputError as e:
        log_warning(f"{e}, using 0", {"effect_id": effect_id})
        return 0


def apply_effect(
    target: Combatant,
    effect: ActionEffect,
    action_name: str,
    verdict: HitCheck,
    custom_values: Mapping[str, Any],
    log: EventLog,
) -> None:
    """
    Applies one effect of an action to one target that was hit.

    Args:
        target (Combatant):
            The combatant receiving the effect.
        effect (ActionEffect):
            The effect to apply.
        action_name (str):
            Name of the action, used in log messages.
        verdict (HitCheck):
            The hit verdict for this target, never a miss here.
        custom_values (Mapping[str, Any]):
            Manually entered values keyed by effect id.
        log (EventLog):
            The log receiving the entries.

    """
    multiplier = CRIT_DAMAGE_MULTIPLIER if verdict.is_critical else 1

    if isinstance(effect, DamageEffect):
        apply_damage(target, effect.value * multiplier, log, action_name, verdict.is_critical)
    elif isinstance(effect, CustomDamageEffect):
        value = resolve_custom_value(custom_values, effect.id)
        apply_damage(target, value * multiplier, log, action_name, verdict.is_critical)
    elif isinstance(effect, HealEffect):
        apply_healing(target, effect.value, log, action_name)
    elif isinstance(effect, CustomHealEffect):
        apply_healing(target, resolve_custom_value(custom_values, effect.id), log, action_name)
    elif isinstance(effect, RestoreMPEffect):
        restore_mp(target, effect.value, log, action_name)
    elif isinstance(effect, AddStatusEffect):
        if not effect.status_name:
            return
        target.statuses.append(
            Status(
                name=effect.status_name,
                duration=effect.status_duration or DEFAULT_STATUS_DURATION,
                duration_type=effect.status_duration_type,
                description=effect.status_description,
            )
        )
        log.add(f'{target.name} gains status "{effect.status_name}"', LogType.STATUS)
    elif isinstance(effect, RemoveStatusEffect):
        if not effect.status_name:
            return
        remaining = [s for s in target.statuses if not s.matches_name(effect.status_name)]
        if len(remaining) != len(target.statuses):
            target.statuses = remaining
            log.add(f'{target.name} loses status "{effect.status_name}"', LogType.STATUS)
    else:
        assert_never(effect)


def resolve_target(
    target: Combatant,
    action: Action,
    verdict: HitCheck,
    custom_values: Mapping[str, Any],
    log: EventLog,
) -> None:
    """Applies every effect of the action to one target, unless it was missed."""
    if verdict.is_miss:
        log.add(f"{target.name}: miss!", LogType.ACTION)
        return
    for effect in action.effects:
        apply_effect(target, effect, action.name, verdict, custom_values, log)


def find_target(roster: Iterable[Combatant], target_id: str) -> Combatant:
    """
    Returns the combatant with the given id.

    Raises:
        UnknownEffectTargetError:
            If no combatant in the roster has that id.

    """
    for combatant in roster:
        if combatant.id == target_id:
            return combatant
    raise UnknownEffectTargetError(f"no combatant with id '{target_id}'")


def _verdict_for(hit_checks: Mapping[str, Any], target_id: str) -> HitCheck:
    raw = hit_checks.get(target_id, HitCheck.SUCCESS)
    if isinstance(raw, HitCheck):
        return raw
    try:
        return HitCheck(raw)
    except ValueError:
        log_warning(
            "Unknown hit verdict, treating it as a success",
            {"target_id": target_id, "verdict": raw},
        )
        return HitCheck.SUCCESS


# ============================================================================
# ENTRY POINTS
# ============================================================================


def apply_action(
    participants: Iterable[Combatant],
    caster_id: str,
    action: Action,
    target_ids: Iterable[str],
    custom_values: Mapping[str, Any] | None = None,
    hit_checks: Mapping[str, Any] | None = None,
) -> tuple[list[Combatant], list[EventLogEntry]]:
    """
    Resolves one use of an action against a set of targets.

    Args:
        participants (Iterable[Combatant]):
            The current roster, left untouched.
        caster_id (str):
            The id of the combatant using the action.
        action (Action):
            The action being used.
        target_ids (Iterable[str]):
            The selected targets. The caster may be among them. Unknown ids
            are ignored.
        custom_values (Mapping[str, Any] | None):
            Values of custom effects keyed by effect id, missing ones are 0.
        hit_checks (Mapping[str, Any] | None):
            Verdicts keyed by target id, missing ones are successes.

    Returns:
        tuple[list[Combatant], list[EventLogEntry]]:
            The updated roster and the log entries, in emission order.

    """
    roster = [c.model_copy(deep=True) for c in participants]
    custom_values = custom_values or {}
    hit_checks = hit_checks or {}
    log = EventLog()

    caster = next((c for c in roster if c.id == caster_id), None)
    if caster is None:
        log_warning(
            f"Ignoring {action.name}: caster not found",
            {"caster_id": caster_id, "action": action.id},
        )
        return roster, []

    log.add(f"{caster.name} uses {action.name}", LogType.ACTION)

    # The cooldown starts once per use, whatever happens to the targets.
    owned = caster.find_action(action.id, action.type)
    if owned is not None:
        owned.start_cooldown()
    elif action.cooldown > 0:
        log_debug(f"{caster.name} does not own {action.name}, no cooldown to start.")

    targets: list[Combatant] = []
    for target_id in dict.fromkeys(target_ids):
        try:
            targets.append(find_target(roster, target_id))
        except UnknownEffectTargetError as e:
            log_debug(f"Skipping a target of {action.name}: {e}")

    position = {c.id: index for index, c in enumerate(roster)}
    for target in sorted(targets, key=lambda c: position[c.id]):
        resolve_target(target, action, _verdict_for(hit_checks, target.id), custom_values, log)

    return roster, list(log)


def resolve_action(
    session: CombatSession,
    caster_id: str,
    action: Action,
    target_ids: Iterable[str],
    custom_values: Mapping[str, Any] | None = None,
    hit_checks: Mapping[str, Any] | None = None,
) -> CombatSession:
    """
    Session-level wrapper of apply_action: returns a new session with the
    updated roster and the produced entries appended to its event log.
    """
    participants, entries = apply_action(
        session.participants, caster_id, action, target_ids, custom_values, hit_checks
    )
    updated = session.updated()
    updated.participants = participants
    updated.event_log.extend(entries)
    return updated
