#!/usr/bin/env python3
"""
Database Reset Script
Drop and recreate the shop tables

Notes:
- Tables are created from the SQLAlchemy models (no migration tooling)
- This script only resets structure, does not seed data
- To seed sample data, run `python script/seed_data.py`
"""

from sqlalchemy import create_engine, inspect

from src.platform.config.core_setting import settings
from src.platform.database.db_setting import Base
import src.service.shop.driven_adapter.model  # noqa: F401


def _count_tables(engine) -> int:
    return len(inspect(engine).get_table_names())


def drop_and_recreate_tables() -> None:
    engine = create_engine(settings.DATABASE_URL_SYNC)

    print(f'Database URL: {settings.DATABASE_URL_SYNC}')
    try:
        print('🗑️ Dropping tables...')
        Base.metadata.drop_all(engine)
        print(f'   📊 {_count_tables(engine)} tables left')

        print('🏗️ Creating tables...')
        Base.metadata.create_all(engine)
        print(f'   ✅ Tables created: {", ".join(sorted(Base.metadata.tables))}')
    finally:
        engine.dispose()


def main():
    print('🔄 Starting database reset...')
    print('=' * 50)

    try:
        drop_and_recreate_tables()
        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed sample data, run: python script/seed_data.py')
    except Exception as e:
        print(f'❌ Reset failed: {e}')
        exit(1)


if __name__ == '__main__':
    main()
