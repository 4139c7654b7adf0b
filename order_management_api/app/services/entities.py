"""
Declarative entity configuration.

Each ``EntityConfig`` binds an entity to its table, its pydantic schemas,
the fields whose values must be unique across the table (business keys)
and the soft references it holds to other entities.  Configs are
immutable; the API layer passes them explicitly to the components that
need them.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple, Type

from pydantic import BaseModel

from ..schemas.order import OrderCreate, OrderRead
from ..schemas.order_detail import OrderDetailCreate, OrderDetailRead
from ..schemas.payment import PaymentCreate, PaymentRead
from ..schemas.supplier import SupplierCreate, SupplierRead


@dataclass(frozen=True)
class Reference:
    """A field whose value should match ``target_field`` of another entity."""

    target: "EntityConfig"
    target_field: str


@dataclass(frozen=True)
class EntityConfig:
    """Everything the generic record handler needs to know about an entity."""

    name: str  # human readable, used in messages ("Order detail")
    table: str
    create_schema: Type[BaseModel]
    read_schema: Type[BaseModel]
    unique_fields: Tuple[str, ...] = ()
    references: Dict[str, Reference] = field(default_factory=dict)

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(self.create_schema.model_fields)

    @property
    def business_key(self):
        """First unique field, used for lookups by business identifier."""
        return self.unique_fields[0] if self.unique_fields else None


ORDER = EntityConfig(
    name="Order",
    table="orders",
    create_schema=OrderCreate,
    read_schema=OrderRead,
)

ORDER_DETAIL = EntityConfig(
    name="Order detail",
    table="order_details",
    create_schema=OrderDetailCreate,
    read_schema=OrderDetailRead,
    unique_fields=("OrderDetailID",),
    references={"OrderID": Reference(ORDER, "OrderID")},
)

PAYMENT = EntityConfig(
    name="Payment",
    table="payments",
    create_schema=PaymentCreate,
    read_schema=PaymentRead,
    unique_fields=("PaymentID",),
    references={"OrderID": Reference(ORDER, "OrderID")},
)

SUPPLIER = EntityConfig(
    name="Supplier",
    table="suppliers",
    create_schema=SupplierCreate,
    read_schema=SupplierRead,
    unique_fields=("SupplierID",),
)

ENTITIES: Tuple[EntityConfig, ...] = (ORDER, ORDER_DETAIL, PAYMENT, SUPPLIER)
