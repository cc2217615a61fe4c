"""
Unit test configuration for the shop service.

In-memory repositories and a unit of work that emulates the relational store:
- products are row-locked by get_active_by_id_for_update until commit/rollback
- cart lines written inside a unit of work become visible to others on commit
"""

import asyncio
from collections.abc import Callable
from datetime import datetime, timezone
from decimal import Decimal
import itertools
from typing import List, Optional

import attrs
import pytest

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.service.shop.app.interface.i_cart_line_repo import ICartLineRepo
from src.service.shop.app.interface.i_product_repo import IProductRepo
from src.service.shop.app.interface.i_user_repo import IUserRepo
from src.service.shop.domain.entity.cart_line_entity import CartLine
from src.service.shop.domain.entity.product_entity import Product
from src.service.shop.domain.entity.user_entity import UserEntity
from src.service.shop.domain.errors import EmailAlreadyExistsError


class InMemoryShopStore:
    def __init__(self) -> None:
        self.products: dict[int, Product] = {}
        self.users: dict[str, UserEntity] = {}
        self.cart_lines: list[CartLine] = []
        self.row_locks: dict[int, asyncio.Lock] = {}
        self._product_ids = itertools.count(1)
        self._cart_line_ids = itertools.count(1)

    def next_product_id(self) -> int:
        return next(self._product_ids)

    def next_cart_line_id(self) -> int:
        return next(self._cart_line_ids)

    def row_lock(self, product_id: int) -> asyncio.Lock:
        return self.row_locks.setdefault(product_id, asyncio.Lock())


def _matches(product: Product, keyword: str) -> bool:
    needle = keyword.lower()
    return needle in product.name.lower() or needle in (product.description or '').lower()


class InMemoryProductRepo(IProductRepo):
    def __init__(self, uow: 'InMemoryUnitOfWork') -> None:
        self.uow = uow
        self.store = uow.store

    async def create(self, *, product: Product) -> Product:
        now = datetime.now(timezone.utc)
        stored = attrs.evolve(
            product, id=self.store.next_product_id(), created_at=now, updated_at=now
        )
        self.store.products[stored.id] = stored  # type: ignore[index]
        return attrs.evolve(stored)

    async def get_by_id(self, *, product_id: int) -> Optional[Product]:
        product = self.store.products.get(product_id)
        return attrs.evolve(product) if product else None

    async def get_active_by_id_for_update(self, *, product_id: int) -> Optional[Product]:
        if product_id not in self.store.products:
            return None
        await self.uow.lock_row(product_id)
        product = self.store.products[product_id]
        return attrs.evolve(product) if product.is_active else None

    async def update(self, *, product: Product) -> Optional[Product]:
        if product.id not in self.store.products:
            return None
        stored = attrs.evolve(product, updated_at=datetime.now(timezone.utc))
        self.store.products[product.id] = stored  # type: ignore[index]
        return attrs.evolve(stored)

    async def soft_delete(self, *, product_id: int) -> bool:
        product = self.store.products.get(product_id)
        if product is None or not product.is_active:
            return False
        product.is_active = False
        return True

    async def list_active(self) -> List[Product]:
        return [
            attrs.evolve(p) for _, p in sorted(self.store.products.items()) if p.is_active
        ]

    async def search(self, *, keyword: str) -> List[Product]:
        return [
            p for p in await self.list_active() if p.stock > 0 and _matches(p, keyword)
        ]


class InMemoryUserRepo(IUserRepo):
    def __init__(self, uow: 'InMemoryUnitOfWork') -> None:
        self.store = uow.store

    def _ensure_unique_email(self, user: UserEntity) -> None:
        for other in self.store.users.values():
            if other.email == user.email and other.id != user.id:
                raise EmailAlreadyExistsError(user.email)

    async def create(self, *, user: UserEntity) -> UserEntity:
        self._ensure_unique_email(user)
        stored = attrs.evolve(user, created_at=datetime.now(timezone.utc))
        self.store.users[stored.id] = stored  # type: ignore[index]
        return attrs.evolve(stored)

    async def get_by_id(self, *, user_id: str) -> Optional[UserEntity]:
        user = self.store.users.get(user_id)
        return attrs.evolve(user) if user else None

    async def list_all(self) -> List[UserEntity]:
        return [attrs.evolve(u) for _, u in sorted(self.store.users.items())]

    async def update(self, *, user: UserEntity) -> Optional[UserEntity]:
        if user.id not in self.store.users:
            return None
        self._ensure_unique_email(user)
        self.store.users[user.id] = attrs.evolve(user)  # type: ignore[index]
        return attrs.evolve(user)


class InMemoryCartLineRepo(ICartLineRepo):
    def __init__(self, uow: 'InMemoryUnitOfWork') -> None:
        self.uow = uow
        self.store = uow.store

    async def sum_quantity_by_product(self, *, product_id: int) -> int:
        lines = self.store.cart_lines + self.uow.pending_cart_lines
        return sum(line.quantity for line in lines if line.product_id == product_id)

    async def create_within_available_stock(self, *, cart_line: CartLine) -> Optional[CartLine]:
        # Yield to other tasks between read and write, as a real round trip would
        await asyncio.sleep(0)
        product = self.store.products.get(cart_line.product_id)
        if product is None or not product.is_active:
            return None
        reserved = await self.sum_quantity_by_product(product_id=cart_line.product_id)
        if product.stock - reserved < cart_line.quantity:
            return None
        created = attrs.evolve(
            cart_line,
            id=self.store.next_cart_line_id(),
            created_at=datetime.now(timezone.utc),
        )
        self.uow.pending_cart_lines.append(created)
        return created

    async def list_by_user(self, *, user_id: str) -> list[CartLine]:
        return [line for line in self.store.cart_lines if line.user_id == user_id]


class InMemoryUnitOfWork(AbstractUnitOfWork):
    def __init__(self, store: InMemoryShopStore) -> None:
        self.store = store
        self.pending_cart_lines: list[CartLine] = []
        self.held_locks: list[asyncio.Lock] = []
        self.committed = False

    async def __aenter__(self):
        self.products = InMemoryProductRepo(self)
        self.users = InMemoryUserRepo(self)
        self.cart_lines = InMemoryCartLineRepo(self)
        self.pending_cart_lines = []
        self.committed = False
        return await super().__aenter__()

    async def lock_row(self, product_id: int) -> None:
        lock = self.store.row_lock(product_id)
        if lock in self.held_locks:
            return
        await lock.acquire()
        self.held_locks.append(lock)

    def _release_locks(self) -> None:
        for lock in self.held_locks:
            lock.release()
        self.held_locks = []

    async def _commit(self) -> None:
        self.store.cart_lines.extend(self.pending_cart_lines)
        self.pending_cart_lines = []
        self.committed = True
        self._release_locks()

    async def rollback(self) -> None:
        self.pending_cart_lines = []
        self._release_locks()


# =============================================================================
# Fixtures
# =============================================================================
@pytest.fixture
def store() -> InMemoryShopStore:
    return InMemoryShopStore()


@pytest.fixture
def uow_factory(store: InMemoryShopStore) -> Callable[[], InMemoryUnitOfWork]:
    """A new unit of work per call, all sharing one store."""
    return lambda: InMemoryUnitOfWork(store)


@pytest.fixture
def seed_product(store: InMemoryShopStore) -> Callable[..., Product]:
    def _seed(
        *,
        name: str = 'Widget',
        description: str = 'A useful widget',
        price: Decimal = Decimal('9.99'),
        stock: int = 5,
        is_active: bool = True,
    ) -> Product:
        product = Product(
            id=store.next_product_id(),
            name=name,
            description=description,
            price=price,
            stock=stock,
            is_active=is_active,
        )
        store.products[product.id] = product  # type: ignore[index]
        return product

    return _seed


@pytest.fixture
def seed_user(store: InMemoryShopStore) -> Callable[..., UserEntity]:
    def _seed(*, email: str = 'u1@example.com') -> UserEntity:
        user = UserEntity.create(first_name='Test', last_name='User', email=email)
        store.users[user.id] = user  # type: ignore[index]
        return user

    return _seed
