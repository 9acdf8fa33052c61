"""Base record configuration."""

import uuid

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """Base for persisted records.

    Attributes are snake_case in Python and camelCase in the stored document.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )


def new_id(prefix: str) -> str:
    """Short opaque record id, e.g. ``p3f9c2a1b7d4e``."""
    return f"{prefix}{uuid.uuid4().hex[:12]}"
