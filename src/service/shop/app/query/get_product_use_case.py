from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.shop.domain.entity.product_entity import Product
from src.service.shop.domain.errors import ProductNotFoundError


class GetProductUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def get_by_id(self, *, product_id: int) -> Product:
        async with self.uow:
            product = await self.uow.products.get_by_id(product_id=product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
