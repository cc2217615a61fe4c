from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


class CartLineModel(Base):
    __tablename__ = 'cart_lines'
    __table_args__ = (CheckConstraint('quantity > 0', name='ck_cart_lines_quantity_positive'),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey('users.id'), nullable=False, index=True
    )
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('products.id'), nullable=False, index=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self):
        return (
            f'<CartLineModel(id={self.id}, user_id={self.user_id}, '
            f'product_id={self.product_id}, quantity={self.quantity})>'
        )
