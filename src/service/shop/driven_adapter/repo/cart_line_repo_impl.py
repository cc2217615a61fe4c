from typing import Optional

from sqlalchemy import Integer, String, func, insert, literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.shop.app.interface.i_cart_line_repo import ICartLineRepo
from src.service.shop.domain.entity.cart_line_entity import CartLine
from src.service.shop.driven_adapter.model.cart_line_model import CartLineModel
from src.service.shop.driven_adapter.model.product_model import ProductModel


class CartLineRepoImpl(ICartLineRepo):
    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_entity(cart_line_model: CartLineModel) -> CartLine:
        return CartLine(
            id=cart_line_model.id,
            user_id=cart_line_model.user_id,
            product_id=cart_line_model.product_id,
            quantity=cart_line_model.quantity,
            created_at=cart_line_model.created_at,
        )

    @staticmethod
    def _reserved_quantity(product_id: int):
        return select(func.coalesce(func.sum(CartLineModel.quantity), 0)).where(
            CartLineModel.product_id == product_id
        )

    @Logger.io
    async def sum_quantity_by_product(self, *, product_id: int) -> int:
        result = await self.session.execute(self._reserved_quantity(product_id))
        return int(result.scalar_one())

    @Logger.io
    async def create_within_available_stock(self, *, cart_line: CartLine) -> Optional[CartLine]:
        """
        INSERT INTO cart_lines (user_id, product_id, quantity)
        SELECT :user_id, :product_id, :quantity
        WHERE (SELECT stock FROM products WHERE id = :product_id AND is_active)
              - (SELECT COALESCE(SUM(quantity), 0) FROM cart_lines WHERE product_id = :product_id)
              >= :quantity
        """
        table = CartLineModel.__table__
        stock = (
            select(ProductModel.stock)
            .where(ProductModel.id == cart_line.product_id)
            .where(ProductModel.is_active.is_(True))
            .scalar_subquery()
        )
        reserved = self._reserved_quantity(cart_line.product_id).scalar_subquery()
        source = select(
            literal(cart_line.user_id, String),
            literal(cart_line.product_id, Integer),
            literal(cart_line.quantity, Integer),
        ).where(stock - reserved >= cart_line.quantity)

        stmt = (
            insert(table)
            .from_select(['user_id', 'product_id', 'quantity'], source)
            .returning(table.c.id, table.c.created_at)
        )
        row = (await self.session.execute(stmt)).one_or_none()
        if row is None:
            return None

        return CartLine(
            id=row.id,
            user_id=cart_line.user_id,
            product_id=cart_line.product_id,
            quantity=cart_line.quantity,
            created_at=row.created_at,
        )

    @Logger.io
    async def list_by_user(self, *, user_id: str) -> list[CartLine]:
        result = await self.session.execute(
            select(CartLineModel)
            .where(CartLineModel.user_id == user_id)
            .order_by(CartLineModel.id)
        )
        return [CartLineRepoImpl._to_entity(model) for model in result.scalars().all()]
