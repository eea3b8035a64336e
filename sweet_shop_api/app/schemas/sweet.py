"""
Pydantic schemas for sweets.

Sign checks on ``price`` and ``quantity`` are done by ``SweetService``
rather than here, so a negative value is answered with HTTP 400 and the
same message for create and update.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SweetCreate(BaseModel):
    """Schema for adding a sweet to the catalogue."""

    name: str = Field(..., examples=["Milk Chocolate Bar"])
    category: str = Field(..., examples=["Chocolate"])
    price: float = Field(..., examples=[3.0])
    quantity: int = Field(..., examples=[10])


class SweetUpdate(BaseModel):
    """Schema for updating a sweet.

    All fields are optional; only provided values will be updated.
    """

    name: Optional[str] = None
    category: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None


class SweetRead(BaseModel):
    """Schema for reading a sweet."""

    id: str
    name: str
    category: str
    price: float
    quantity: int

    model_config = {
        "from_attributes": True,
    }


class StockChange(BaseModel):
    """Body of the purchase and restock endpoints."""

    quantity: int = Field(1, description="Number of units; defaults to one")


class DeleteResult(BaseModel):
    success: bool
