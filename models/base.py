"""
Base model classes and timestamp helpers.
"""

import time
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def now_ms() -> int:
    """Current time as integer milliseconds since the epoch."""
    return int(time.time() * 1000)


class CatalogModel(BaseModel):
    """
    Base for all persisted catalog records.

    Attributes are snake_case in Python and camelCase on the wire
    (``createdAt``, ``aiSummary``). Either name is accepted on input.
    Records are frozen: a change means building a new record.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",  # Tolerate fields written by newer clients
    )

    def to_json_dict(self) -> dict:
        """Wire form: camelCase keys, absent optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
