"""
Event log module for the tracker.

The event log is the user-facing audit trail of the encounter: an
append-only, ordered list of rendered messages. Entries are never edited or
removed, except by clearing the whole log.
"""

from collections.abc import Iterator

from core.constants import LogType
from core.logging import log_debug
from core.models import TrackerModel
from core.utils import new_id, now_ms
from pydantic import Field, RootModel


class EventLogEntry(TrackerModel):
    """One rendered event of the encounter."""

    id: str = Field(
        default_factory=new_id,
        description="Unique identifier of the entry.",
    )
    timestamp: int = Field(
        default_factory=now_ms,
        description="Creation time in milliseconds since the epoch.",
    )
    message: str = Field(
        description="The rendered text of the event.",
    )
    type: LogType = Field(
        description="The category of the event.",
    )

    @property
    def colored_message(self) -> str:
        """Returns the message colored by event type."""
        return self.type.colorize(self.message)


class EventLog(RootModel[list[EventLogEntry]]):
    """Append-only ordered collection of log entries."""

    root: list[EventLogEntry] = Field(default_factory=list)

    def __iter__(self) -> Iterator[EventLogEntry]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> EventLogEntry:
        return self.root[index]

    def add(self, message: str, log_type: LogType) -> EventLogEntry:
        """
        Appends a new entry.

        Args:
            message (str):
                The rendered message.
            log_type (LogType):
                The category of the event.

        Returns:
            EventLogEntry:
                The appended entry.

        """
        entry = EventLogEntry(message=message, type=log_type)
        self.root.append(entry)
        log_debug(f"[{log_type.value}] {message}")
        return entry

    def extend(self, entries: list[EventLogEntry]) -> None:
        """Appends already built entries, keeping their order."""
        self.root.extend(entries)

    def clear(self) -> None:
        """Removes every entry."""
        self.root.clear()

    def messages(self, log_type: LogType | None = None) -> list[str]:
        """Returns the messages, optionally only those of one type."""
        return [e.message for e in self.root if log_type is None or e.type == log_type]
