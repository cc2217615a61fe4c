"""
Cart API Schemas - Pydantic models for request/response
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CartItemRequest(BaseModel):
    product_id: int = Field(..., alias='productId')
    quantity: int

    class Config:
        populate_by_name = True
        json_schema_extra = {'example': {'productId': 1, 'quantity': 2}}


class CartLineResponse(BaseModel):
    id: int
    user_id: str
    product_id: int
    quantity: int
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
