"""
Constants and enumerations for the tracker.

Defines the enumerations used across the engine (factions, action types,
effect types, status durations, hit verdicts, equipment slots, log types)
together with the global numeric constants of the combat rules.
"""

from enum import Enum

# Number of successes (or failures) that ends the death-save protocol.
DEATH_SAVE_LIMIT = 3

# Multiplier applied to damage effects on a critical success.
CRIT_DAMAGE_MULTIPLIER = 2

# Defaults used when an addStatus effect does not specify them.
DEFAULT_STATUS_DURATION = 1

# Prefix written in the description of statuses derived from equipment.
EQUIPMENT_TAG = "[Equipment"

# Prefixes that identified equipment statuses in older saves.
LEGACY_EQUIPMENT_TAGS = ("[Equipment", "[Снаряжение")


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()

    @property
    def color(self) -> str:
        return "dim white"

    @property
    def emoji(self) -> str:
        return "❔"

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies the enum color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class Faction(NiceEnum):
    """Defines the side of a combatant, which also selects its health model."""

    PLAYER = "player"
    NPC = "npc"
    BOSS = "boss"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this faction."""
        return {
            Faction.PLAYER: "👤",
            Faction.NPC: "👹",
            Faction.BOSS: "🐉",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this faction."""
        return {
            Faction.PLAYER: "bold blue",
            Faction.NPC: "bold red",
            Faction.BOSS: "bold magenta",
        }.get(self, "dim white")


class ActionType(NiceEnum):
    """Defines the category list an action belongs to."""

    ATTACK = "attack"
    ABILITY = "ability"
    SPELL = "spell"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this action type."""
        return {
            ActionType.ATTACK: "⚔️",
            ActionType.ABILITY: "💪",
            ActionType.SPELL: "✨",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this action type."""
        return {
            ActionType.ATTACK: "bold red",
            ActionType.ABILITY: "bold yellow",
            ActionType.SPELL: "bold cyan",
        }.get(self, "dim white")


class EffectType(NiceEnum):
    """Defines the kinds of consequences an action can have on a target."""

    DAMAGE = "damage"
    HEAL = "heal"
    RESTORE_MP = "restoreMP"
    ADD_STATUS = "addStatus"
    REMOVE_STATUS = "removeStatus"
    CUSTOM_DAMAGE = "customDamage"
    CUSTOM_HEAL = "customHeal"


class DurationType(NiceEnum):
    """Defines which clock tick consumes the duration of a status."""

    ROUNDS = "rounds"
    TURNS = "turns"
    UNTIL_REMOVED = "untilRemoved"

    @property
    def short_name(self) -> str:
        """Returns the compact suffix used when displaying a duration."""
        return {
            DurationType.ROUNDS: "r",
            DurationType.TURNS: "t",
            DurationType.UNTIL_REMOVED: "∞",
        }.get(self, "?")


class StatusOrigin(NiceEnum):
    """Defines where a status came from."""

    MANUAL = "manual"
    EQUIPMENT = "equipment"


class HitCheck(NiceEnum):
    """Externally decided hit-quality verdict of an action against one target."""

    SUCCESS = "success"
    FAIL = "fail"
    CRIT_SUCCESS = "critSuccess"
    CRIT_FAIL = "critFail"

    @property
    def is_miss(self) -> bool:
        """True when the action does nothing to the target."""
        return self in (HitCheck.FAIL, HitCheck.CRIT_FAIL)

    @property
    def is_critical(self) -> bool:
        """True when damage effects are multiplied."""
        return self == HitCheck.CRIT_SUCCESS


class EquipmentSlot(NiceEnum):
    """Defines the fixed equipment slots of a combatant."""

    HEAD = "head"
    CHEST = "chest"
    LEGS = "legs"
    FEET = "feet"
    HANDS = "hands"
    WEAPON = "weapon"
    OFFHAND = "offhand"
    ACCESSORY1 = "accessory1"
    ACCESSORY2 = "accessory2"


class LogType(NiceEnum):
    """Defines the category of an event log entry."""

    ROUND = "round"
    TURN = "turn"
    DAMAGE = "damage"
    HEAL = "heal"
    STATUS = "status"
    ACTION = "action"
    REST = "rest"

    @property
    def color(self) -> str:
        """Returns the color string associated with this log type."""
        return {
            LogType.ROUND: "bold green",
            LogType.TURN: "cyan",
            LogType.DAMAGE: "bold red",
            LogType.HEAL: "bold green",
            LogType.STATUS: "bold yellow",
            LogType.ACTION: "bold blue",
            LogType.REST: "magenta",
        }.get(self, "dim white")

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this log type."""
        return {
            LogType.ROUND: "🔄",
            LogType.TURN: "▶️",
            LogType.DAMAGE: "💥",
            LogType.HEAL: "💚",
            LogType.STATUS: "✨",
            LogType.ACTION: "⚡",
            LogType.REST: "🏕️",
        }.get(self, "❔")
