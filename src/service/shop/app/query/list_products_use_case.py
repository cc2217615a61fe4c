from typing import List

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.shop.domain.entity.product_entity import Product


class ListProductsUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def list_active(self) -> List[Product]:
        async with self.uow:
            return await self.uow.products.list_active()

    @Logger.io
    async def search(self, *, keyword: str) -> List[Product]:
        """Active, in-stock products matching keyword in name or description (case-insensitive)."""
        async with self.uow:
            return await self.uow.products.search(keyword=keyword)
