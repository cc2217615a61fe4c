from decimal import Decimal
from typing import Optional

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.shop.domain.entity.product_entity import Product
from src.service.shop.domain.errors import ProductNotFoundError


class UpdateProductUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def update(
        self,
        *,
        product_id: int,
        name: str,
        description: str,
        price: Decimal,
        stock: int,
        category: Optional[str] = None,
        img_url: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> Product:
        """Replace the catalog fields of a product; is_active is kept unless given."""
        async with self.uow:
            product = await self.uow.products.get_by_id(product_id=product_id)
            if product is None:
                raise ProductNotFoundError(product_id)

            product.replace_details(
                name=name,
                description=description,
                price=price,
                stock=stock,
                category=category,
                img_url=img_url,
                is_active=is_active,
            )
            updated_product = await self.uow.products.update(product=product)
            if updated_product is None:
                raise ProductNotFoundError(product_id)

            await self.uow.commit()
        return updated_product
