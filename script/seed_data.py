#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the database

Features:
1. Create Users - 1 manager + 2 salespeople reporting to it
2. Create Show - a show one week ahead with a matinee and an evening performance

Notes:
- Run `python -m script.reset_database` first for a clean schema
- Every user gets the same password: P@ssw0rd
"""

import asyncio
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from src.platform.database.orm_db_setting import Database, dispose_engine, get_session_maker
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.auditorium.app.command.create_show_use_case import CreateShowUseCase
from src.service.auditorium.app.command.user_use_case import UserUseCase
from src.service.auditorium.domain.entity.user_entity import UserEntity, UserRole
from src.service.auditorium.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.auditorium.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.auditorium.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


DEFAULT_PASSWORD = 'P@ssw0rd'


@dataclass
class UserConfig:
    """User seed configuration"""

    email: str
    name: str
    role: UserRole
    address: str = 'Auditorium box office'
    phone_number: str = '+15550100'


MANAGER = UserConfig(email='m@t.com', name='init manager', role=UserRole.MANAGER)
SALESPEOPLE = [
    UserConfig(email='s@t.com', name='init salesperson', role=UserRole.SALESPERSON),
    UserConfig(email='s_1@t.com', name='second salesperson', role=UserRole.SALESPERSON),
]

SEAT_CATEGORIES = [
    {'category': 'balcony', 'total_seats': 10, 'price': Decimal('300')},
    {'category': 'ordinary', 'total_seats': 50, 'price': Decimal('200')},
]


def _user_use_case() -> UserUseCase:
    database = Database()
    password_hasher = BcryptPasswordHasher()
    return UserUseCase(
        user_command_repo=UserCommandRepoImpl(database.session),
        user_query_repo=UserQueryRepoImpl(database.session, password_hasher),
        password_hasher=password_hasher,
    )


async def create_users() -> UserEntity:
    """Create the manager and its salespeople, returns the manager"""
    print(f'👥 Creating {len(SALESPEOPLE) + 1} users...')
    use_case = _user_use_case()

    manager = await use_case.create_user(
        email=MANAGER.email,
        password=DEFAULT_PASSWORD,
        name=MANAGER.name,
        address=MANAGER.address,
        phone_number=MANAGER.phone_number,
        role=MANAGER.role,
    )
    print(f'   ✅ {manager.role.value}: {manager.email} (id={manager.id})')

    for config in SALESPEOPLE:
        salesperson = await use_case.create_user(
            email=config.email,
            password=DEFAULT_PASSWORD,
            name=config.name,
            address=config.address,
            phone_number=config.phone_number,
            role=config.role,
            manager_id=manager.id,
        )
        print(f'   ✅ {salesperson.role.value}: {salesperson.email} (id={salesperson.id})')

    return manager


async def create_show(manager: UserEntity) -> None:
    print('🎭 Creating show...')
    async with get_session_maker()() as session:
        use_case = CreateShowUseCase(uow=SqlAlchemyUnitOfWork(session))
        show = await use_case.create_show(
            manager_id=manager.id,  # type: ignore[arg-type]
            show_date=date.today() + timedelta(days=7),
            number_of_shows=2,
            performances=[
                {'timing': '14:00', 'seat_categories': SEAT_CATEGORIES},
                {'timing': '19:30', 'seat_categories': SEAT_CATEGORIES},
            ],
        )
    print(f'   ✅ Show {show.id} on {show.show_date} (14:00, 19:30)')


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)
    try:
        manager = await create_users()
        await create_show(manager)
        print('=' * 50)
        print('✅ Data seeding completed!')
    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        raise SystemExit(1) from e
    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
