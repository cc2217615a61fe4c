from decimal import Decimal
from typing import Optional

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.shop.domain.entity.product_entity import Product


class CreateProductUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def create(
        self,
        *,
        name: str,
        description: str,
        price: Decimal,
        stock: int,
        category: Optional[str] = None,
        img_url: Optional[str] = None,
    ) -> Product:
        product = Product.create(
            name=name,
            description=description,
            price=price,
            stock=stock,
            category=category,
            img_url=img_url,
        )
        async with self.uow:
            created_product = await self.uow.products.create(product=product)
            await self.uow.commit()
        return created_product
