from datetime import datetime
from typing import Any, Optional

import attrs

from src.service.shop.domain.errors import InvalidQuantityError


def validate_positive_quantity(instance: Any, attribute: Any, value: int) -> None:
    if value <= 0:
        raise InvalidQuantityError(value)


@attrs.define(frozen=True)
class CartLine:
    """A quantity of one product recorded against a user's cart. Lines are never merged."""

    user_id: str
    product_id: int
    quantity: int = attrs.field(validator=validate_positive_quantity)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
