"""Product repository implementation."""

from typing import List, Optional

from sqlalchemy import or_, select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.shop.app.interface.i_product_repo import IProductRepo
from src.service.shop.domain.entity.product_entity import Product
from src.service.shop.driven_adapter.model.product_model import ProductModel


class ProductRepoImpl(IProductRepo):
    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_entity(db_product: ProductModel) -> Product:
        """Convert database model to domain entity."""
        return Product(
            id=db_product.id,
            name=db_product.name,
            description=db_product.description,
            price=db_product.price,
            stock=db_product.stock,
            category=db_product.category,
            img_url=db_product.img_url,
            is_active=db_product.is_active,
            created_at=db_product.created_at,
            updated_at=db_product.updated_at,
        )

    @Logger.io
    async def create(self, *, product: Product) -> Product:
        db_product = ProductModel(
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
            category=product.category,
            img_url=product.img_url,
            is_active=product.is_active,
        )
        self.session.add(db_product)
        await self.session.flush()
        await self.session.refresh(db_product)

        return ProductRepoImpl._to_entity(db_product)

    @Logger.io
    async def get_by_id(self, *, product_id: int) -> Optional[Product]:
        result = await self.session.execute(
            select(ProductModel).where(ProductModel.id == product_id)
        )
        db_product = result.scalar_one_or_none()

        if not db_product:
            return None

        return ProductRepoImpl._to_entity(db_product)

    @Logger.io
    async def get_active_by_id_for_update(self, *, product_id: int) -> Optional[Product]:
        # FOR UPDATE is rendered on PostgreSQL and dropped by the SQLite compiler
        result = await self.session.execute(
            select(ProductModel)
            .where(ProductModel.id == product_id)
            .where(ProductModel.is_active.is_(True))
            .with_for_update()
        )
        db_product = result.scalar_one_or_none()

        if not db_product:
            return None

        return ProductRepoImpl._to_entity(db_product)

    @Logger.io
    async def update(self, *, product: Product) -> Optional[Product]:
        stmt = (
            sql_update(ProductModel)
            .where(ProductModel.id == product.id)
            .values(
                name=product.name,
                description=product.description,
                price=product.price,
                stock=product.stock,
                category=product.category,
                img_url=product.img_url,
                is_active=product.is_active,
            )
            .returning(ProductModel)
            .execution_options(populate_existing=True)
        )

        result = await self.session.execute(stmt)
        db_product = result.scalar_one_or_none()

        if not db_product:
            return None

        return ProductRepoImpl._to_entity(db_product)

    @Logger.io
    async def soft_delete(self, *, product_id: int) -> bool:
        stmt = (
            sql_update(ProductModel)
            .where(ProductModel.id == product_id)
            .where(ProductModel.is_active.is_(True))
            .values(is_active=False)
            .returning(ProductModel.id)
        )

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    @Logger.io
    async def list_active(self) -> List[Product]:
        result = await self.session.execute(
            select(ProductModel).where(ProductModel.is_active.is_(True)).order_by(ProductModel.id)
        )
        db_products = result.scalars().all()

        return [ProductRepoImpl._to_entity(db_product) for db_product in db_products]

    @Logger.io
    async def search(self, *, keyword: str) -> List[Product]:
        result = await self.session.execute(
            select(ProductModel)
            .where(ProductModel.is_active.is_(True))
            .where(ProductModel.stock > 0)
            .where(
                or_(
                    ProductModel.name.icontains(keyword, autoescape=True),
                    ProductModel.description.icontains(keyword, autoescape=True),
                )
            )
            .order_by(ProductModel.id)
        )
        db_products = result.scalars().all()

        return [ProductRepoImpl._to_entity(db_product) for db_product in db_products]
