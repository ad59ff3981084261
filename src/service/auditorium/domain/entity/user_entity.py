from datetime import datetime
from enum import Enum
from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import ForbiddenError, LoginError, ValidationError
from src.service.auditorium.app.interface.i_password_hasher import IPasswordHasher


class UserRole(str, Enum):
    MANAGER = 'manager'
    SALESPERSON = 'salesperson'


@attrs.define
class UserEntity:
    email: str = ''
    name: str = ''
    address: str = ''
    phone_number: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    role: UserRole = UserRole.SALESPERSON
    manager_id: Optional[int] = None
    is_active: bool = True
    created_at: Optional[datetime] = None

    @property
    def is_manager(self) -> bool:
        return self.role == UserRole.MANAGER

    def validate_active(self) -> None:
        if not self.is_active:
            raise ForbiddenError('User is inactive')

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise LoginError('LOGIN_BAD_CREDENTIALS')

        return user_entity

    def validate_manager_assignment(self) -> None:
        """A salesperson always reports to a manager; a manager reports to nobody."""
        if self.role == UserRole.SALESPERSON and not self.manager_id:
            raise ValidationError('manager_id is required for salesperson')
        if self.role == UserRole.MANAGER and self.manager_id:
            raise ValidationError('manager_id must be empty for manager')

    def manages(self, other: 'UserEntity') -> bool:
        return self.is_manager and other.manager_id is not None and other.manager_id == self.id

    def set_password(self, plain_password: str, password_hasher: IPasswordHasher) -> None:
        if not isinstance(password_hasher, IPasswordHasher):
            raise TypeError('password_hasher must implement IPasswordHasher interface')

        # Use SecretStr to protect sensitive password data
        secret_password = SecretStr(plain_password)
        self.hashed_password = password_hasher.hash_password(plain_password=secret_password)
