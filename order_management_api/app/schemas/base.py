"""Shared pydantic configuration for entity schemas."""

from pydantic import BaseModel, ConfigDict

# Largest value a SQLite INTEGER column can hold.
MAX_QUANTITY = 2**63 - 1


class RecordIn(BaseModel):
    """Base for request bodies.

    Strings are trimmed before constraints are checked, infinite and NaN
    numbers are rejected and unknown keys are dropped rather than
    rejected.
    """

    model_config = ConfigDict(str_strip_whitespace=True, allow_inf_nan=False, extra="ignore")


class RecordOut(BaseModel):
    """Base for stored records; ``id`` is the store-assigned key."""

    id: str

    model_config = ConfigDict(from_attributes=True)
