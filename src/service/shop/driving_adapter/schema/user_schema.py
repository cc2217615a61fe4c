"""
User API Schemas - Pydantic models for request/response
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from src.service.shop.domain.entity.user_entity import UserRole


class AddressSchema(BaseModel):
    street: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    zip_code: Optional[str] = Field(None, max_length=20)
    country: Optional[str] = Field(None, max_length=100)

    class Config:
        from_attributes = True


class UserRequest(BaseModel):
    """Create / full update user request schema"""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    role: UserRole = UserRole.CUSTOMER
    address: Optional[AddressSchema] = None

    class Config:
        json_schema_extra = {
            'example': {
                'first_name': 'Ada',
                'last_name': 'Lovelace',
                'email': 'ada@example.com',
                'phone': '+44 20 7946 0000',
                'role': 'customer',
                'address': {
                    'street': '12 St James Square',
                    'city': 'London',
                    'state': None,
                    'zip_code': 'SW1Y 4JH',
                    'country': 'UK',
                },
            }
        }


class UserResponse(BaseModel):
    """User response schema"""

    id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str]
    role: UserRole
    address: Optional[AddressSchema]
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
