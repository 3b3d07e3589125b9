"""
Shared pydantic base for every persisted record of the tracker.

Python attributes are snake_case while the persisted format uses camelCase
keys, so records written by the tracker stay readable by the web client that
shares the save files.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TrackerModel(BaseModel):
    """Base model with camelCase aliases that also accepts field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict:
        """Returns the JSON-compatible dictionary in the persisted format."""
        return self.model_dump(mode="json", by_alias=True)
