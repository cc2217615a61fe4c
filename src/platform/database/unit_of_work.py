"""
Unit of Work Pattern - one session / one transaction shared by the shop repositories

Architecture:
- UoW owns the session lifecycle (open on enter, close on exit)
- UoW owns commit/rollback
- Repositories receive the shared session from the UoW
- Use cases coordinate repositories through the UoW
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Callable, Optional

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import StorageUnavailableError
from src.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from src.service.shop.app.interface.i_cart_line_repo import ICartLineRepo
    from src.service.shop.app.interface.i_product_repo import IProductRepo
    from src.service.shop.app.interface.i_user_repo import IUserRepo


STORAGE_ERRORS = (OperationalError, InterfaceError, PoolTimeoutError, OSError)


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the Shop Service

    Usage:
        async with uow:
            product = await uow.products.get_active_by_id_for_update(product_id=1)
            await uow.cart_lines.create_within_available_stock(...)
            await uow.commit()

    Leaving the block without commit rolls back.
    """

    products: IProductRepo
    users: IUserRepo
    cart_lines: ICartLineRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    A new AsyncSession is opened on every `async with`, so a single instance
    must not be entered concurrently. Driver level connection failures are
    re-raised as StorageUnavailableError.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self):
        from src.service.shop.driven_adapter.repo.cart_line_repo_impl import CartLineRepoImpl
        from src.service.shop.driven_adapter.repo.product_repo_impl import ProductRepoImpl
        from src.service.shop.driven_adapter.repo.user_repo_impl import UserRepoImpl

        self.session = self.session_factory()
        self.products = ProductRepoImpl(session=self.session)
        self.users = UserRepoImpl(session=self.session)
        self.cart_lines = CartLineRepoImpl(session=self.session)

        return await super().__aenter__()

    async def __aexit__(self, exc_type, exc, tb):
        try:
            await super().__aexit__(exc_type, exc, tb)
        except STORAGE_ERRORS as e:
            Logger.base.warning(f'⚠️ [UoW] Rollback failed: {e}')
        finally:
            if self.session is not None:
                await self.session.close()
                self.session = None

        if exc is not None and isinstance(exc, STORAGE_ERRORS):
            Logger.base.error(f'❌ [UoW] Storage unavailable: {type(exc).__name__}: {exc}')
            raise StorageUnavailableError() from exc

    async def _commit(self):
        if self.session is None:
            raise RuntimeError('UnitOfWork not entered')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
