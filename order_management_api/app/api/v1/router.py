"""
Top‑level router for version 1 of the API.

One CRUD router is built per entity from its ``EntityConfig``.  To
expose a new entity, declare its config in ``services.entities`` and
add it to ``RESOURCE_PREFIXES``.
"""

from fastapi import APIRouter

from order_management_api.app.services import entities
from order_management_api.app.services.resource_service import ResourceService

from .endpoints import health, resources

RESOURCE_PREFIXES = (
    ("/orders", entities.ORDER, "orders"),
    ("/order-details", entities.ORDER_DETAIL, "order details"),
    ("/payments", entities.PAYMENT, "payments"),
    ("/suppliers", entities.SUPPLIER, "suppliers"),
)


def build_router(enforce_references: bool = False) -> APIRouter:
    """Assemble the v1 router.

    ``enforce_references`` is passed to every entity service and turns on
    existence checks for soft references such as ``Payment.OrderID``.
    """
    router = APIRouter()
    router.include_router(health.router, prefix="/health", tags=["health"])
    for prefix, config, tag in RESOURCE_PREFIXES:
        service = ResourceService(config, enforce_references=enforce_references)
        router.include_router(resources.build_router(service), prefix=prefix, tags=[tag])
    return router
