"""Store-assigned record identifiers."""

import uuid


def new_id() -> str:
    """Return a fresh 128-bit random identifier as 32 hex characters."""
    return uuid.uuid4().hex
