from abc import ABC, abstractmethod
from typing import Optional

from src.service.shop.domain.entity.cart_line_entity import CartLine


class ICartLineRepo(ABC):
    """Cart Store - append-only cart lines"""

    @abstractmethod
    async def sum_quantity_by_product(self, *, product_id: int) -> int:
        """Total quantity already recorded in carts for the product."""
        pass

    @abstractmethod
    async def create_within_available_stock(self, *, cart_line: CartLine) -> Optional[CartLine]:
        """
        Insert the line only if product stock minus existing cart quantities
        still covers it. Returns None (nothing written) when it no longer does.
        """
        pass

    @abstractmethod
    async def list_by_user(self, *, user_id: str) -> list[CartLine]:
        pass
