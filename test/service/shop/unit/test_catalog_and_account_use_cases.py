"""
Unit tests for the catalog and account use cases

Each use case runs inside its own in-memory unit of work.
"""

from decimal import Decimal

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.shop.app.command.create_product_use_case import CreateProductUseCase
from src.service.shop.app.command.create_user_use_case import CreateUserUseCase
from src.service.shop.app.command.delete_product_use_case import DeleteProductUseCase
from src.service.shop.app.command.update_product_use_case import UpdateProductUseCase
from src.service.shop.app.command.update_user_use_case import UpdateUserUseCase
from src.service.shop.app.query.get_product_use_case import GetProductUseCase
from src.service.shop.app.query.get_user_use_case import GetUserUseCase
from src.service.shop.app.query.list_products_use_case import ListProductsUseCase
from src.service.shop.app.query.list_users_use_case import ListUsersUseCase
from src.service.shop.domain.entity.user_entity import Address, UserRole
from src.service.shop.domain.errors import (
    EmailAlreadyExistsError,
    ProductNotFoundError,
    UserNotFoundError,
)


@pytest.mark.unit
class TestCatalogUseCases:
    @pytest.mark.asyncio
    async def test_create_then_get_product(self, uow_factory):
        created = await CreateProductUseCase(uow=uow_factory()).create(
            name='Lamp', description='Desk lamp', price=Decimal('12.50'), stock=3
        )

        fetched = await GetProductUseCase(uow=uow_factory()).get_by_id(product_id=created.id)

        assert created.id is not None
        assert fetched.name == 'Lamp'
        assert fetched.stock == 3

    @pytest.mark.asyncio
    async def test_create_rejects_negative_stock(self, store, uow_factory):
        with pytest.raises(DomainError):
            await CreateProductUseCase(uow=uow_factory()).create(
                name='Lamp', description='', price=Decimal('1'), stock=-1
            )

        assert store.products == {}

    @pytest.mark.asyncio
    async def test_get_unknown_product_raises_not_found(self, uow_factory):
        with pytest.raises(ProductNotFoundError):
            await GetProductUseCase(uow=uow_factory()).get_by_id(product_id=42)

    @pytest.mark.asyncio
    async def test_update_replaces_catalog_fields(self, uow_factory, seed_product):
        product = seed_product(name='Old', stock=1)

        updated = await UpdateProductUseCase(uow=uow_factory()).update(
            product_id=product.id,
            name='New',
            description='Renamed',
            price=Decimal('3.00'),
            stock=7,
            category='misc',
            img_url='https://example.com/new.png',
        )

        assert updated.name == 'New'
        assert updated.stock == 7
        assert updated.category == 'misc'
        assert updated.is_active is True

    @pytest.mark.asyncio
    async def test_update_unknown_product_raises_not_found(self, uow_factory):
        with pytest.raises(ProductNotFoundError):
            await UpdateProductUseCase(uow=uow_factory()).update(
                product_id=42, name='X', description='', price=Decimal('1'), stock=1
            )

    @pytest.mark.asyncio
    async def test_delete_is_soft_and_hides_product_from_listing(
        self, store, uow_factory, seed_product
    ):
        product = seed_product()

        deleted = await DeleteProductUseCase(uow=uow_factory()).delete(product_id=product.id)
        listed = await ListProductsUseCase(uow=uow_factory()).list_active()

        assert deleted is True
        assert listed == []
        assert store.products[product.id].is_active is False

    @pytest.mark.asyncio
    async def test_delete_twice_returns_false(self, uow_factory, seed_product):
        product = seed_product()

        await DeleteProductUseCase(uow=uow_factory()).delete(product_id=product.id)
        again = await DeleteProductUseCase(uow=uow_factory()).delete(product_id=product.id)

        assert again is False

    @pytest.mark.asyncio
    async def test_search_matches_active_in_stock_products_only(self, uow_factory, seed_product):
        keyboard = seed_product(name='Mechanical Keyboard', stock=3)
        seed_product(name='Keyboard Cover', stock=0)
        seed_product(name='Retired Keyboard', stock=5, is_active=False)
        seed_product(name='Mouse', description='pairs with any KEYBOARD', stock=2)

        results = await ListProductsUseCase(uow=uow_factory()).search(keyword='keyboard')

        assert [p.name for p in results] == ['Mechanical Keyboard', 'Mouse']
        assert results[0].id == keyboard.id


@pytest.mark.unit
class TestAccountUseCases:
    @pytest.mark.asyncio
    async def test_create_user_then_list(self, uow_factory):
        user = await CreateUserUseCase(uow=uow_factory()).create(
            first_name='Ada', last_name='Lovelace', email='ada@example.com'
        )

        users = await ListUsersUseCase(uow=uow_factory()).list_all()

        assert [u.id for u in users] == [user.id]
        assert users[0].role == UserRole.CUSTOMER

    @pytest.mark.asyncio
    async def test_duplicate_email_is_a_conflict(self, uow_factory):
        await CreateUserUseCase(uow=uow_factory()).create(
            first_name='Ada', last_name='Lovelace', email='ada@example.com'
        )

        with pytest.raises(EmailAlreadyExistsError) as exc_info:
            await CreateUserUseCase(uow=uow_factory()).create(
                first_name='Other', last_name='Person', email='ada@example.com'
            )

        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_get_unknown_user_raises_not_found(self, uow_factory):
        with pytest.raises(UserNotFoundError):
            await GetUserUseCase(uow=uow_factory()).get_by_id(user_id='missing')

    @pytest.mark.asyncio
    async def test_update_replaces_every_field_and_keeps_id(self, uow_factory, seed_user):
        user = seed_user(email='before@example.com')
        address = Address(street='1 Main St', city='Springfield', zip_code='12345', country='US')

        updated = await UpdateUserUseCase(uow=uow_factory()).update(
            user_id=user.id,
            first_name='Grace',
            last_name='Hopper',
            email='after@example.com',
            phone='555-0100',
            role=UserRole.ADMIN,
            address=address,
        )
        fetched = await GetUserUseCase(uow=uow_factory()).get_by_id(user_id=user.id)

        assert updated.id == user.id
        assert fetched.email == 'after@example.com'
        assert fetched.phone == '555-0100'
        assert fetched.role == UserRole.ADMIN
        assert fetched.address == address

    @pytest.mark.asyncio
    async def test_update_unknown_user_raises_not_found(self, uow_factory):
        with pytest.raises(UserNotFoundError):
            await UpdateUserUseCase(uow=uow_factory()).update(
                user_id='missing', first_name='A', last_name='B', email='a@example.com'
            )
