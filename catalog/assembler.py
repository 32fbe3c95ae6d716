"""
Entry assembler - turns submitted fields into a finalized catalog entry.
"""

import uuid
from typing import Collection, Optional

from models import CatalogEntry, EntryInput, User, now_ms
from .errors import ValidationError


def new_entry_id(existing_ids: Collection[str] = ()) -> str:
    """Random entry id not present in ``existing_ids``."""
    while True:
        entry_id = uuid.uuid4().hex
        if entry_id not in existing_ids:
            return entry_id


def assemble(
    entry_input: EntryInput,
    author: User,
    existing_ids: Collection[str] = (),
    now: Optional[int] = None,
) -> CatalogEntry:
    """
    Build a new entry from form input.

    Assigns a fresh id, equal created/updated timestamps, version 1 and zero
    likes. The author is copied so later profile edits don't leak into
    historical entries.

    Raises ValidationError if title or prompt is blank.
    """
    missing = entry_input.missing_fields()
    if missing:
        raise ValidationError(missing)

    timestamp = now if now is not None else now_ms()

    return CatalogEntry(
        id=new_entry_id(existing_ids),
        title=entry_input.title.strip(),
        description=entry_input.description,
        prompt=entry_input.prompt,
        builder_url=entry_input.builder_url,
        deployed_url=entry_input.deployed_url,
        tags=entry_input.tags,
        author=author.model_copy(deep=True),
        created_at=timestamp,
        updated_at=timestamp,
        version=1,
        likes=0,
        ai_summary=entry_input.ai_summary,
        ai_rating=entry_input.ai_rating,
    )
