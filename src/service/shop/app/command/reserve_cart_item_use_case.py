import time

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import StorageUnavailableError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.shop_metrics import metrics
from src.service.shop.domain.entity.cart_line_entity import CartLine
from src.service.shop.domain.errors import (
    InsufficientStockError,
    InvalidQuantityError,
    ProductNotFoundError,
    UserNotFoundError,
)


_RESULT_LABELS: dict[type[Exception], str] = {
    ProductNotFoundError: 'product_not_found',
    InvalidQuantityError: 'invalid_quantity',
    InsufficientStockError: 'insufficient_stock',
    UserNotFoundError: 'user_not_found',
    StorageUnavailableError: 'storage_unavailable',
}


class ReserveCartItemUseCase:
    """
    Reserve stock for a user's cart by recording a cart line.

    Checks, each one short-circuiting:
    1. Product exists and is active (row locked for the rest of the transaction)
    2. Quantity is positive
    3. Available stock (stock minus quantities already in carts) covers the quantity
    4. User exists
    5. Conditional insert: the line is written only if step 3 still holds

    Product.stock itself is never decremented. Every success appends a new line,
    so two identical calls produce two lines.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def reserve(self, *, user_id: str, product_id: int, quantity: int) -> CartLine:
        start_time = time.perf_counter()
        result = 'success'
        try:
            return await self._reserve(user_id=user_id, product_id=product_id, quantity=quantity)
        except Exception as e:
            result = _RESULT_LABELS.get(type(e), 'error')
            raise
        finally:
            metrics.record_cart_reservation(
                result=result, duration=time.perf_counter() - start_time
            )

    async def _reserve(self, *, user_id: str, product_id: int, quantity: int) -> CartLine:
        async with self.uow:
            product = await self.uow.products.get_active_by_id_for_update(product_id=product_id)
            if product is None:
                raise ProductNotFoundError(product_id)

            if quantity <= 0:
                raise InvalidQuantityError(quantity)

            reserved = await self.uow.cart_lines.sum_quantity_by_product(product_id=product_id)
            available = product.stock - reserved
            if available < quantity:
                raise InsufficientStockError(
                    product_id=product_id, requested=quantity, available=max(available, 0)
                )

            if await self.uow.users.get_by_id(user_id=user_id) is None:
                raise UserNotFoundError(user_id)

            cart_line = await self.uow.cart_lines.create_within_available_stock(
                cart_line=CartLine(user_id=user_id, product_id=product_id, quantity=quantity)
            )
            if cart_line is None:
                # Another transaction consumed the stock between the check and the write
                reserved = await self.uow.cart_lines.sum_quantity_by_product(
                    product_id=product_id
                )
                raise InsufficientStockError(
                    product_id=product_id,
                    requested=quantity,
                    available=max(product.stock - reserved, 0),
                )

            await self.uow.commit()

        Logger.base.info(
            f'🛒 [Cart] Reserved {quantity} x product {product_id} (line {cart_line.id})'
        )
        return cart_line
