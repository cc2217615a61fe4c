#!/usr/bin/env python3
"""
Database Seed Script
Populate sample catalog and accounts through the application use cases

Features:
1. Create Users - one admin and two customers
2. Create Products - a small catalog, one of them out of stock
"""

import asyncio
from dataclasses import dataclass
from decimal import Decimal

from src.platform.config.di import container
from src.platform.database.db_setting import create_db_and_tables
from src.service.shop.domain.entity.user_entity import UserRole


@dataclass
class UserConfig:
    """User seed configuration"""

    first_name: str
    last_name: str
    email: str
    role: UserRole


@dataclass
class ProductConfig:
    """Product seed configuration"""

    name: str
    description: str
    price: Decimal
    stock: int
    category: str


TEST_USERS = [
    UserConfig(first_name='Init', last_name='Admin', email='admin@shop.com', role=UserRole.ADMIN),
    UserConfig(first_name='Init', last_name='Customer', email='c@shop.com', role=UserRole.CUSTOMER),
    UserConfig(first_name='Load', last_name='Test', email='c_1@shop.com', role=UserRole.CUSTOMER),
]

TEST_PRODUCTS = [
    ProductConfig(
        'Mechanical Keyboard', 'Hot-swappable 75% keyboard', Decimal('129.99'), 50, 'peripherals'
    ),
    ProductConfig(
        'Wireless Mouse', 'Ergonomic mouse, any keyboard', Decimal('39.90'), 120, 'peripherals'
    ),
    ProductConfig('27" Monitor', 'IPS panel, 1440p', Decimal('279.00'), 10, 'displays'),
    ProductConfig('USB-C Hub', '7-in-1 hub', Decimal('24.50'), 0, 'accessories'),
]


async def create_users() -> None:
    print(f'👥 Creating {len(TEST_USERS)} users...')
    for config in TEST_USERS:
        user = await container.create_user_use_case().create(
            first_name=config.first_name,
            last_name=config.last_name,
            email=config.email,
            role=config.role,
        )
        print(f'   ✅ Created {config.role.value}: ID={user.id}, Email={user.email}')


async def create_products() -> None:
    print(f'📦 Creating {len(TEST_PRODUCTS)} products...')
    for config in TEST_PRODUCTS:
        product = await container.create_product_use_case().create(
            name=config.name,
            description=config.description,
            price=config.price,
            stock=config.stock,
            category=config.category,
        )
        print(f'   ✅ Created product: ID={product.id}, Name={product.name}')


async def verify_data() -> None:
    print('🔍 Verifying seeded data...')
    users = await container.list_users_use_case().list_all()
    products = await container.list_products_use_case().list_active()
    print(f'   User count: {len(users)}')
    print(f'   Active product count: {len(products)}')


async def main():
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        await create_db_and_tables()
        await create_users()
        await create_products()
        await verify_data()
        print('=' * 50)
        print('✅ Data seeding completed!')
    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        raise
    finally:
        await container.database().dispose()


if __name__ == '__main__':
    asyncio.run(main())
