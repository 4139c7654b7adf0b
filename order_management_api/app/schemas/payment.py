"""
Pydantic models for payment data.

``PaymentDate`` accepts ISO‑8601 strings and is returned in the same
format.  ``PaymentMethod`` is free text (e.g. ``GCash``, ``Credit Card``).
"""

from datetime import datetime

from pydantic import Field

from .base import RecordIn, RecordOut


class PaymentCreate(RecordIn):
    """Schema for creating or replacing a payment."""

    PaymentID: str = Field(..., min_length=1, examples=["PAY-1"])
    OrderID: str = Field(..., min_length=1, examples=["ORD-1001"])
    PaymentDate: datetime = Field(..., examples=["2024-05-01T10:00:00"])
    PaymentMethod: str = Field(..., min_length=1, examples=["Credit Card"])
    PaymentAmount: float = Field(..., ge=0, examples=[59.97])


class PaymentRead(RecordOut, PaymentCreate):
    """Schema for reading a payment."""

    pass
