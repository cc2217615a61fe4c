from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.shop.domain.entity.product_entity import Product


class IProductRepo(ABC):
    """Catalog Store - products, soft-deleted through is_active"""

    @abstractmethod
    async def create(self, *, product: Product) -> Product:
        pass

    @abstractmethod
    async def get_by_id(self, *, product_id: int) -> Optional[Product]:
        """Active or inactive product by id."""
        pass

    @abstractmethod
    async def get_active_by_id_for_update(self, *, product_id: int) -> Optional[Product]:
        """Active product by id, row-locked until the surrounding transaction ends."""
        pass

    @abstractmethod
    async def update(self, *, product: Product) -> Optional[Product]:
        pass

    @abstractmethod
    async def soft_delete(self, *, product_id: int) -> bool:
        pass

    @abstractmethod
    async def list_active(self) -> List[Product]:
        pass

    @abstractmethod
    async def search(self, *, keyword: str) -> List[Product]:
        """Active, in-stock products whose name or description contains keyword."""
        pass
