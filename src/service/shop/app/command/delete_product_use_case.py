from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger


class DeleteProductUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def delete(self, *, product_id: int) -> bool:
        """Soft delete. False when no active product has this id."""
        async with self.uow:
            deleted = await self.uow.products.soft_delete(product_id=product_id)
            if deleted:
                await self.uow.commit()
        return deleted
