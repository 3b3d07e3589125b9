"""
Error taxonomy of the combat engine.

Only MalformedSnapshotError crosses a public boundary. The other conditions
are recovered inside the operation that meets them and reported through the
logging helpers.
"""


class TrackerError(Exception):
    """Base class for every error raised by the tracker."""


class EmptyRosterError(TrackerError):
    """Turn navigation was requested on a session without participants."""


class MalformedSnapshotError(TrackerError):
    """A persisted session or save could not be parsed or has the wrong shape."""


class UnknownEffectTargetError(TrackerError):
    """A target id does not match any live combatant."""


class InvalidNumericInputError(TrackerError):
    """A numeric edit was negative, non-numeric or otherwise out of bounds."""
