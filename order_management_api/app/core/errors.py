"""Exceptions raised by the record lifecycle."""

from typing import Any, Dict, List


class RecordError(Exception):
    """Base exception for record lifecycle failures."""

    pass


class ValidationFailed(RecordError):
    """Input failed field validation.

    ``violations`` holds every offending field, in schema order, as
    ``{"field": ..., "message": ...}`` pairs.
    """

    def __init__(self, violations: List[Dict[str, str]]):
        self.violations = violations
        fields = ", ".join(v["field"] for v in violations)
        super().__init__(f"Validation failed for: {fields}")


class RecordNotFound(RecordError):
    """No record exists at the given identifier."""

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} not found")


class DuplicateKey(RecordError):
    """A unique business key is already taken."""

    def __init__(self, entity: str, field: str, value: Any = None):
        self.entity = entity
        self.field = field
        self.value = value
        if value is None:
            msg = f"{entity} with this {field} already exists"
        else:
            msg = f"{entity} with {field} '{value}' already exists"
        super().__init__(msg)


class StorageUnavailable(RecordError):
    """The underlying storage engine could not complete the operation."""

    def __init__(self, operation: str, reason: str = ""):
        self.operation = operation
        self.reason = reason
        msg = f"Storage failure during {operation}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
