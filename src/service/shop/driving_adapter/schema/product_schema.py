"""
Product API Schemas - Pydantic models for request/response
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class ProductCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ''
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    stock: int = Field(..., ge=0)
    category: Optional[str] = Field(None, max_length=100)
    img_url: Optional[str] = Field(None, max_length=500)

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Mechanical Keyboard',
                'description': 'Hot-swappable 75% keyboard',
                'price': '129.99',
                'stock': 25,
                'category': 'peripherals',
                'img_url': 'https://example.com/keyboard.png',
            }
        }


class ProductUpdateRequest(ProductCreateRequest):
    is_active: Optional[bool] = None


class ProductResponse(BaseModel):
    id: int
    name: str
    description: str
    price: Decimal
    stock: int
    category: Optional[str]
    img_url: Optional[str]
    is_active: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True
