"""
CRUD endpoints shared by every entity.

``build_router`` turns a ``ResourceService`` into an ``APIRouter`` with
the five record operations (plus a lookup by business key for entities
that declare one).  Every route requires an authenticated caller.
Service exceptions are translated to HTTP errors here so nothing
propagates past the endpoint:

* ``ValidationFailed`` -> 400 with the list of field violations
* ``DuplicateKey`` -> 400
* ``RecordNotFound`` -> 404 "<Entity> not found"
* ``StorageUnavailable`` -> 500 with a generic message
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, Path, status

from order_management_api.app.core.errors import (
    DuplicateKey,
    RecordError,
    RecordNotFound,
    StorageUnavailable,
    ValidationFailed,
)
from order_management_api.app.core.security import get_current_user
from order_management_api.app.services.resource_service import ResourceService

logger = logging.getLogger(__name__)


def to_http_error(exc: RecordError) -> HTTPException:
    """Map a record lifecycle failure to the HTTP error returned to clients."""
    if isinstance(exc, ValidationFailed):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.violations)
    if isinstance(exc, DuplicateKey):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, RecordNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, StorageUnavailable):
        logger.error("%s", exc, exc_info=exc)
    else:
        logger.exception("Unexpected record error")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


def build_router(service: ResourceService) -> APIRouter:
    """Create the routes for the entity handled by ``service``."""
    config = service.config
    read_model = config.read_schema
    table = config.table
    router = APIRouter(dependencies=[Depends(get_current_user)])

    @router.post("/", response_model=read_model, status_code=status.HTTP_201_CREATED, name=f"create_{table}")
    async def create_record(payload: Any = Body(...)) -> Dict[str, Any]:
        try:
            return await service.create(payload)
        except RecordError as e:
            raise to_http_error(e)

    @router.get("/", response_model=List[read_model], name=f"list_{table}")
    async def list_records() -> List[Dict[str, Any]]:
        try:
            return await service.list()
        except RecordError as e:
            raise to_http_error(e)

    if config.business_key:
        @router.get("/by-key/{value}", response_model=read_model, name=f"lookup_{table}")
        async def lookup_record(
            value: str = Path(..., description=f"{config.business_key} of the {config.name.lower()}"),
        ) -> Dict[str, Any]:
            try:
                return await service.get_by_business_key(value)
            except RecordError as e:
                raise to_http_error(e)

    @router.get("/{record_id}", response_model=read_model, name=f"get_{table}")
    async def get_record(record_id: str = Path(..., description="Store-assigned ID")) -> Dict[str, Any]:
        try:
            return await service.get(record_id)
        except RecordError as e:
            raise to_http_error(e)

    @router.put("/{record_id}", response_model=read_model, name=f"update_{table}")
    async def update_record(
        record_id: str = Path(..., description="Store-assigned ID"),
        payload: Any = Body(...),
    ) -> Dict[str, Any]:
        try:
            return await service.update(record_id, payload)
        except RecordError as e:
            raise to_http_error(e)

    @router.delete("/{record_id}", name=f"delete_{table}")
    async def delete_record(record_id: str = Path(..., description="Store-assigned ID")) -> Dict[str, str]:
        try:
            await service.delete(record_id)
        except RecordError as e:
            raise to_http_error(e)
        return {"message": f"{config.name} deleted successfully"}

    return router
