"""
Pydantic models for orders.

An order references a product by its ``ProductID``.  ``OrderID`` is a
caller‑supplied label and, unlike the business keys of the other
entities, is not required to be unique.
"""

from pydantic import Field

from .base import MAX_QUANTITY, RecordIn, RecordOut


class OrderCreate(RecordIn):
    """Schema for creating or replacing an order."""

    OrderID: str = Field(..., min_length=1, examples=["ORD-1001"])
    ProductID: str = Field(..., min_length=1, examples=["PRD-77"], description="Product being ordered")
    Quantity: int = Field(..., ge=0, le=MAX_QUANTITY, examples=[3])
    Price: float = Field(..., ge=0, examples=[19.99], description="Price per unit")


class OrderRead(RecordOut, OrderCreate):
    """Schema for reading an order."""

    pass
