"""
Session snapshots.

A snapshot is the whole durable state of an encounter serialized as JSON
with camelCase keys. Loading tolerates optional fields missing from older
saves. A snapshot that cannot be parsed at all is replaced by a fresh session.
"""

from pathlib import Path

from catchery import log_warning
from combat.session import CombatSession
from core.errors import MalformedSnapshotError
from core.logging import log_error, log_info
from pydantic import ValidationError


def dump_session(session: CombatSession, indent: int | None = 2) -> str:
    """Serializes a session to JSON text."""
    return session.model_dump_json(by_alias=True, indent=indent)


def parse_session(text: str) -> CombatSession:
    """
    Parses a session from JSON text.

    Args:
        text (str):
            The JSON text of a snapshot.

    Returns:
        CombatSession:
            The parsed session.

    Raises:
        MalformedSnapshotError:
            If the text is not JSON or does not have the shape of a session.

    """
    try:
        return CombatSession.model_validate_json(text)
    except (ValidationError, ValueError) as e:
        raise MalformedSnapshotError(f"Cannot parse session snapshot: {e}") from e


def load_session(text: str | None) -> CombatSession:
    """
    Loads a session, falling back to a fresh one when there is nothing to
    load or the snapshot is malformed.
    """
    if not text or not text.strip():
        return CombatSession()
    try:
        return parse_session(text)
    except MalformedSnapshotError as e:
        log_warning(
            "Discarding malformed session snapshot, starting a fresh session",
            {"error": str(e)},
        )
        return CombatSession()


def save_session_file(path: Path | str, session: CombatSession) -> Path:
    """Writes a session snapshot to a file, creating parent folders."""
    filepath = Path(path)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(dump_session(session), encoding="utf-8")
    log_info("Session saved", {"path": str(filepath), "participants": len(session.participants)})
    return filepath


def load_session_file(path: Path | str) -> CombatSession:
    """Reads a session snapshot from a file. A missing file gives a fresh session."""
    filepath = Path(path)
    if not filepath.is_file():
        log_warning("Session file not found, starting a fresh session", {"path": str(filepath)})
        return CombatSession()
    try:
        text = filepath.read_text(encoding="utf-8")
    except OSError as e:
        log_error("Cannot read session file, starting a fresh session", {"path": str(filepath), "error": str(e)})
        return CombatSession()
    return load_session(text)
