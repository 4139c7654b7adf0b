"""
Record lifecycle orchestration.

``ResourceService`` implements create, list, get, update and delete for
one entity: input is validated first, a new identifier is assigned on
create, and the entity store is called exactly once for the write.
Failures are raised as the exceptions in ``core.errors`` and mapped to
HTTP responses by the endpoint layer.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.errors import RecordNotFound, ValidationFailed
from .entities import EntityConfig
from .entity_store import EntityStore
from .identifiers import new_id
from .validator import validate


class ResourceService:
    """Service for the records of a single entity."""

    def __init__(
        self,
        config: EntityConfig,
        store: Optional[EntityStore] = None,
        enforce_references: bool = False,
    ):
        self.config = config
        self.store = store or EntityStore(config)
        self.enforce_references = enforce_references
        self.logger = logging.getLogger(f"{__name__}.{config.table}")

    def _check_references(self, record: Dict[str, Any]) -> None:
        """Reject values of reference fields that match no target record."""
        violations = []
        for field, ref in self.config.references.items():
            value = record.get(field)
            if EntityStore(ref.target).get_by_field(ref.target_field, value) is None:
                violations.append(
                    {"field": field, "message": f"{ref.target.name} '{value}' does not exist"}
                )
        if violations:
            raise ValidationFailed(violations)

    def _prepare(self, raw: Any) -> Dict[str, Any]:
        payload = validate(self.config, raw)
        if self.enforce_references:
            self._check_references(payload)
        return payload

    async def create(self, raw: Any) -> Dict[str, Any]:
        """Validate ``raw`` and store it as a new record."""
        payload = self._prepare(raw)
        record = self.store.create(new_id(), payload)
        self.logger.info("Created %s %s", self.config.name, record["id"])
        return record

    async def list(self) -> List[Dict[str, Any]]:
        return self.store.list()

    async def get(self, record_id: str) -> Dict[str, Any]:
        record = self.store.get_by_id(record_id)
        if record is None:
            raise RecordNotFound(self.config.name, record_id)
        return record

    async def get_by_business_key(self, value: str) -> Dict[str, Any]:
        """Look a record up by its unique business identifier."""
        key = self.config.business_key
        if key is None:
            raise RecordNotFound(self.config.name, value)
        record = self.store.get_by_field(key, value)
        if record is None:
            raise RecordNotFound(self.config.name, value)
        return record

    async def update(self, record_id: str, raw: Any) -> Dict[str, Any]:
        """Replace the record at ``record_id`` with the validated ``raw``.

        Update is not an upsert: an unknown id raises ``RecordNotFound``
        and nothing is written.
        """
        payload = self._prepare(raw)
        record = self.store.update_by_id(record_id, payload)
        if record is None:
            raise RecordNotFound(self.config.name, record_id)
        self.logger.info("Updated %s %s", self.config.name, record_id)
        return record

    async def delete(self, record_id: str) -> None:
        if not self.store.delete_by_id(record_id):
            raise RecordNotFound(self.config.name, record_id)
        self.logger.info("Deleted %s %s", self.config.name, record_id)
