from datetime import datetime
from enum import Enum
from typing import Any, Optional

import attrs
import uuid_utils

from src.platform.exception.exceptions import DomainError


class UserRole(str, Enum):
    CUSTOMER = 'customer'
    ADMIN = 'admin'


@attrs.frozen
class Address:
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None

    def is_empty(self) -> bool:
        return not any(attrs.astuple(self))


def validate_required_text(instance: Any, attribute: Any, value: str) -> None:
    if not value or not value.strip():
        raise DomainError(f'{attribute.name} is required')


def validate_email(instance: Any, attribute: Any, value: str) -> None:
    if not value or '@' not in value:
        raise DomainError(f'Invalid email: {value}')


@attrs.define
class UserEntity:
    first_name: str = attrs.field(validator=validate_required_text)
    last_name: str = attrs.field(validator=validate_required_text)
    email: str = attrs.field(validator=validate_email)
    phone: Optional[str] = None
    role: UserRole = attrs.field(default=UserRole.CUSTOMER, converter=UserRole)
    address: Optional[Address] = None
    id: Optional[str] = attrs.field(default=None, on_setattr=attrs.setters.frozen)
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        first_name: str,
        last_name: str,
        email: str,
        phone: Optional[str] = None,
        role: UserRole = UserRole.CUSTOMER,
        address: Optional[Address] = None,
    ) -> 'UserEntity':
        """New account with a time-ordered UUIDv7 id."""
        return cls(
            id=str(uuid_utils.uuid7()),
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            role=role,
            address=address,
        )

    def replace_profile(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        phone: Optional[str],
        role: UserRole,
        address: Optional[Address],
    ) -> None:
        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.phone = phone
        self.role = role
        self.address = address
