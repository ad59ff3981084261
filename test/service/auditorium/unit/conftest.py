import pytest

from src.service.auditorium.domain.entity.user_entity import UserEntity, UserRole
from test.service.auditorium.unit.fakes import FakeUnitOfWork


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def manager() -> UserEntity:
    return UserEntity(id=1, email='m@test.com', name='Manager', role=UserRole.MANAGER)


@pytest.fixture
def salesperson() -> UserEntity:
    return UserEntity(
        id=2, email='s@test.com', name='Sales', role=UserRole.SALESPERSON, manager_id=1
    )


@pytest.fixture
def other_salesperson() -> UserEntity:
    return UserEntity(
        id=3, email='o@test.com', name='Other', role=UserRole.SALESPERSON, manager_id=1
    )
