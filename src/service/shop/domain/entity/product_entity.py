from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import DomainError


def to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise DomainError(f'Invalid price: {value}') from e


def validate_name(instance: Any, attribute: Any, value: str) -> None:
    if not value or not value.strip():
        raise DomainError('Product name is required')


def validate_non_negative_price(instance: Any, attribute: Any, value: Decimal) -> None:
    if value < 0:
        raise DomainError('Price must not be negative')


def validate_non_negative_stock(instance: Any, attribute: Any, value: int) -> None:
    if value < 0:
        raise DomainError('Stock must not be negative')


@attrs.define
class Product:
    name: str = attrs.field(validator=[attrs.validators.instance_of(str), validate_name])
    price: Decimal = attrs.field(converter=to_decimal, validator=validate_non_negative_price)
    stock: int = attrs.field(
        validator=[attrs.validators.instance_of(int), validate_non_negative_stock]
    )
    description: str = ''
    category: Optional[str] = None
    img_url: Optional[str] = None
    is_active: bool = attrs.field(default=True, validator=attrs.validators.instance_of(bool))
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        name: str,
        description: str,
        price: Decimal,
        stock: int,
        category: Optional[str] = None,
        img_url: Optional[str] = None,
    ) -> 'Product':
        return cls(
            name=name,
            description=description,
            price=price,
            stock=stock,
            category=category,
            img_url=img_url,
            is_active=True,
            id=None,
        )

    def replace_details(
        self,
        *,
        name: str,
        description: str,
        price: Decimal,
        stock: int,
        category: Optional[str],
        img_url: Optional[str],
        is_active: Optional[bool] = None,
    ) -> None:
        """Overwrite the catalog fields; validators run on every assignment."""
        self.name = name
        self.description = description
        self.price = price  # type: ignore[assignment]
        self.stock = stock
        self.category = category
        self.img_url = img_url
        if is_active is not None:
            self.is_active = is_active

