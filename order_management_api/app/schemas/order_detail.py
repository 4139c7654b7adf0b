"""
Pydantic models for order details (line items).

``OrderDetailID`` is unique across all order details; ``OrderID`` and
``ProductID`` are soft references that are not checked unless
reference enforcement is switched on.
"""

from pydantic import Field

from .base import MAX_QUANTITY, RecordIn, RecordOut


class OrderDetailCreate(RecordIn):
    """Schema for creating or replacing an order detail."""

    OrderDetailID: str = Field(..., min_length=1, examples=["OD-1"])
    OrderID: str = Field(..., min_length=1, examples=["ORD-1001"], description="Order this line belongs to")
    ProductID: str = Field(..., min_length=1, examples=["PRD-77"])
    Quantity: int = Field(..., ge=0, le=MAX_QUANTITY, examples=[2])
    Price: float = Field(..., ge=0, examples=[4.5], description="Price per unit")


class OrderDetailRead(RecordOut, OrderDetailCreate):
    """Schema for reading an order detail."""

    pass
