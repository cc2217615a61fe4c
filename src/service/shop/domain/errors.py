"""Shop domain errors."""

from enum import Enum

from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError


class ShopErrorMessage(str, Enum):
    PRODUCT_NOT_FOUND = 'Product not found'
    USER_NOT_FOUND = 'User not found'
    INSUFFICIENT_STOCK = 'Insufficient stock'
    INVALID_QUANTITY = 'Quantity must be greater than 0'
    EMAIL_ALREADY_EXISTS = 'User with this email already exists'


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f'{ShopErrorMessage.PRODUCT_NOT_FOUND.value}: {product_id}')


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f'{ShopErrorMessage.USER_NOT_FOUND.value}: {user_id}')


class InsufficientStockError(ConflictError):
    def __init__(self, *, product_id: int, requested: int, available: int) -> None:
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            f'{ShopErrorMessage.INSUFFICIENT_STOCK.value} for product {product_id}. '
            f'Requested: {requested}, Available: {available}'
        )


class InvalidQuantityError(DomainError):
    def __init__(self, quantity: int) -> None:
        self.quantity = quantity
        super().__init__(f'{ShopErrorMessage.INVALID_QUANTITY.value}, got {quantity}')


class EmailAlreadyExistsError(ConflictError):
    def __init__(self, email: str) -> None:
        super().__init__(ShopErrorMessage.EMAIL_ALREADY_EXISTS.value)

