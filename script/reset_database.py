#!/usr/bin/env python3
"""
Database Reset Script
Reset the auditorium booking schema

Features:
1. Drop every table owned by the service
2. Recreate the latest schema from the ORM models

Notes:
- This script only resets database structure, does not seed test data
- To seed test data, run `python -m script.seed_data`
"""

import asyncio

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engine,
    drop_db_and_tables,
)


async def main() -> None:
    print('🔄 Starting database reset...')
    print('=' * 50)
    print(f'Database URL: {settings.DATABASE_URL_ASYNC}')

    try:
        print('🗑️ Dropping tables...')
        await drop_db_and_tables()
        print('   ✅ Tables dropped')

        print('🏗️ Creating tables...')
        await create_db_and_tables()
        print('   ✅ Tables created')

        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed test data, run: python -m script.seed_data')

    except Exception as e:
        print(f'❌ Reset failed: {e}')
        raise SystemExit(1) from e
    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
