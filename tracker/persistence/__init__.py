"""
Persistence module for the TTRPG combat tracker.

This module contains the JSON snapshots of a session and the save catalog
with its file export and import.
"""

from .saves import (
    SaveCatalog,
    SaveData,
    create_save,
    delete_save,
    dump_catalog,
    dump_save,
    export_save,
    import_save,
    load_catalog,
    load_save,
    parse_save,
)
from .snapshot import (
    dump_session,
    load_session,
    load_session_file,
    parse_session,
    save_session_file,
)

__all__ = [
    # Import from saves.py
    "SaveCatalog",
    "SaveData",
    "create_save",
    "delete_save",
    "dump_catalog",
    "dump_save",
    "export_save",
    "import_save",
    "load_catalog",
    "load_save",
    "parse_save",
    # Import from snapshot.py
    "dump_session",
    "load_session",
    "load_session_file",
    "parse_session",
    "save_session_file",
]
