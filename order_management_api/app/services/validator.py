"""
Field validation for incoming records.

``validate`` checks a raw request body against an entity's create
schema.  Every field is inspected and all violations are reported at
once, in schema order, as ``{"field", "message"}`` pairs.  On success
the normalized record is returned as a plain dict of JSON‑compatible
values (trimmed strings, numbers, ISO dates), ready to be stored.
"""

from typing import Any, Dict, List

from pydantic import ValidationError

from ..core.errors import ValidationFailed
from .entities import EntityConfig


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "body"


def violations_from_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Convert pydantic error dicts into ``{"field", "message"}`` pairs."""
    return [{"field": _field_name(tuple(err["loc"])), "message": err["msg"]} for err in errors]


def validate(config: EntityConfig, raw: Any) -> Dict[str, Any]:
    """Validate ``raw`` against ``config.create_schema``.

    Raises
    ------
    ValidationFailed
        With the complete list of violations.
    """
    if not isinstance(raw, dict):
        raise ValidationFailed([{"field": "body", "message": "Request body must be a JSON object"}])
    try:
        model = config.create_schema.model_validate(raw)
    except ValidationError as exc:
        raise ValidationFailed(violations_from_errors(exc.errors())) from exc
    return model.model_dump(mode="json")
