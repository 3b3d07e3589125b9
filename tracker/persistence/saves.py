"""
Save catalog.

Named, timestamped snapshots of a session together with the rest settings
that were in use. Saves can be exported to a JSON file each and imported
back, receiving a fresh id on import.
"""

import re
from pathlib import Path

from catchery import log_warning
from combat.rest import RestSettings
from combat.session import CombatSession
from core.constants import LogType
from core.errors import MalformedSnapshotError
from core.logging import log_info
from core.models import TrackerModel
from core.utils import new_id, now_ms
from pydantic import Field, RootModel, ValidationError


class SaveData(TrackerModel):
    """One named snapshot in the save catalog."""

    id: str = Field(
        default_factory=new_id,
        description="Unique identifier of the save.",
    )
    name: str = Field(
        description="The name chosen for the save.",
    )
    description: str = Field(
        default="",
        description="Optional free-text notes.",
    )
    timestamp: int = Field(
        default_factory=now_ms,
        description="Creation time in milliseconds since the epoch.",
    )
    combat_state: CombatSession = Field(
        default_factory=CombatSession,
        description="The stored session.",
    )
    rest_settings: RestSettings = Field(
        default_factory=RestSettings,
        description="The rest presets in use when the save was made.",
    )


class SaveCatalog(RootModel[list[SaveData]]):
    """Ordered list of saves, oldest first."""

    root: list[SaveData] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.root)

    def find(self, save_id: str) -> SaveData | None:
        """Returns the save with the given id, or None."""
        return next((s for s in self.root if s.id == save_id), None)


# ============================================================================
# CATALOG OPERATIONS
# ============================================================================


def create_save(
    catalog: SaveCatalog,
    session: CombatSession,
    name: str,
    description: str = "",
    settings: RestSettings | None = None,
) -> tuple[SaveCatalog, CombatSession]:
    """
    Stores a snapshot of the session in the catalog.

    Args:
        catalog (SaveCatalog):
            The current catalog, left untouched.
        session (CombatSession):
            The session to store.
        name (str):
            The name of the save.
        description (str):
            Optional notes.
        settings (RestSettings | None):
            The rest presets to store, defaults when omitted.

    Returns:
        tuple[SaveCatalog, CombatSession]:
            The new catalog and the session with a log entry recording the save.

    """
    save = SaveData(
        name=name,
        description=description,
        combat_state=session.updated(),
        rest_settings=(settings or RestSettings()).model_copy(deep=True),
    )
    updated_catalog = SaveCatalog(root=[*catalog.root, save])
    updated = session.updated()
    updated.log(f'Save "{name}" created', LogType.ACTION)
    return updated_catalog, updated


def load_save(catalog: SaveCatalog, save_id: str) -> CombatSession | None:
    """
    Restores the session stored in a save, with a log entry recording the load.

    Returns None, with a warning, if there is no save with that id.
    """
    save = catalog.find(save_id)
    if save is None:
        log_warning("Cannot load unknown save", {"save_id": save_id})
        return None
    session = save.combat_state.updated()
    session.log(f'Save "{save.name}" loaded', LogType.ACTION)
    return session


def delete_save(catalog: SaveCatalog, save_id: str) -> SaveCatalog:
    """Removes a save from the catalog. Unknown ids are ignored."""
    return SaveCatalog(root=[s.model_copy(deep=True) for s in catalog.root if s.id != save_id])


# ============================================================================
# FILES
# ============================================================================


def dump_save(save: SaveData) -> str:
    """Serializes one save to JSON text."""
    return save.model_dump_json(by_alias=True, indent=2)


def parse_save(text: str) -> SaveData:
    """
    Parses one save from JSON text.

    Raises:
        MalformedSnapshotError:
            If the text is not a valid save.

    """
    try:
        return SaveData.model_validate_json(text)
    except (ValidationError, ValueError) as e:
        raise MalformedSnapshotError(f"Cannot parse save: {e}") from e


def _file_name(name: str) -> str:
    # Keep the chosen name, minus characters no filesystem accepts.
    cleaned = re.sub(r'[\\/:*?"<>|]', "_", name).strip()
    return f"{cleaned or 'save'}.json"


def export_save(save: SaveData, directory: Path | str) -> Path:
    """
    Writes a save verbatim to `<directory>/<save name>.json`.

    Returns:
        Path:
            The written file.

    """
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    filepath = folder / _file_name(save.name)
    filepath.write_text(dump_save(save), encoding="utf-8")
    log_info(f"Exported save '{save.name}'", {"path": str(filepath)})
    return filepath


def import_save(
    catalog: SaveCatalog, path: Path | str, session: CombatSession
) -> tuple[SaveCatalog, CombatSession]:
    """
    Reads an exported save and appends it to the catalog under a fresh id.

    A missing or malformed file leaves the catalog and the session as they
    are, with a warning.

    Returns:
        tuple[SaveCatalog, CombatSession]:
            The new catalog and the session with a log entry recording the import.

    """
    filepath = Path(path)
    updated = session.updated()
    try:
        save = parse_save(filepath.read_text(encoding="utf-8"))
    except (OSError, MalformedSnapshotError) as e:
        log_warning("Failed to import save", {"path": str(filepath), "error": str(e)})
        return SaveCatalog(root=[s.model_copy(deep=True) for s in catalog.root]), updated
    save.id = new_id()
    updated.log(f'Imported save "{save.name}"', LogType.ACTION)
    return SaveCatalog(root=[*(s.model_copy(deep=True) for s in catalog.root), save]), updated


def dump_catalog(catalog: SaveCatalog) -> str:
    """Serializes the whole catalog to JSON text."""
    return catalog.model_dump_json(by_alias=True, indent=2)


def load_catalog(text: str | None) -> SaveCatalog:
    """Loads a catalog, falling back to an empty one when it is missing or malformed."""
    if not text or not text.strip():
        return SaveCatalog()
    try:
        return SaveCatalog.model_validate_json(text)
    except (ValidationError, ValueError) as e:
        log_warning("Discarding malformed save catalog", {"error": str(e)})
        return SaveCatalog()
