from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Header, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.shop.app.command.reserve_cart_item_use_case import ReserveCartItemUseCase
from src.service.shop.driving_adapter.schema.cart_schema import CartItemRequest, CartLineResponse


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def add_to_cart(
    request: CartItemRequest,
    user_id: str = Header(..., alias='X-User-Id'),
    use_case: ReserveCartItemUseCase = Depends(Provide[Container.reserve_cart_item_use_case]),
) -> CartLineResponse:
    """
    Reserve stock for the caller's cart.

    404 unknown product or user, 409 insufficient stock, 400 non-positive quantity.
    """
    cart_line = await use_case.reserve(
        user_id=user_id, product_id=request.product_id, quantity=request.quantity
    )
    return CartLineResponse.model_validate(cart_line)
