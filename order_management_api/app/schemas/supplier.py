"""Pydantic models for suppliers."""

from pydantic import Field

from .base import RecordIn, RecordOut


class SupplierCreate(RecordIn):
    """Schema for creating or replacing a supplier."""

    SupplierID: str = Field(..., min_length=1, examples=["S1"])
    SupplierName: str = Field(..., min_length=1, examples=["Acme"])
    ContactInfo: str = Field(..., min_length=1, examples=["a@acme.com"], description="Phone number or e‑mail")
    Address: str = Field(..., min_length=1, examples=["1 Main St"])


class SupplierRead(RecordOut, SupplierCreate):
    """Schema for reading a supplier."""

    pass
