"""
User API Schemas - Pydantic models for request/response
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr

from src.service.auditorium.domain.entity.user_entity import UserRole


# E.164, leading + optional
PHONE_NUMBER_PATTERN = r'^\+?[1-9]\d{1,14}$'


class CreateUserRequest(BaseModel):
    """Create user request schema"""

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'email': 'sales@example.com',
                'password': 'P@ssw0rd',
                'name': 'Sam Sales',
                'address': '221B Baker Street, London',
                'phone_number': '+442071234567',
                'role': 'salesperson',
                'manager_id': 1,
            }
        }
    )

    email: EmailStr
    password: SecretStr = Field(
        ...,
        min_length=8,
        max_length=30,
        description='Password must be 8-30 characters (bcrypt limit)',
    )
    name: str = Field(..., min_length=1, max_length=100)
    address: str = Field(..., min_length=1, max_length=500)
    phone_number: str = Field(..., pattern=PHONE_NUMBER_PATTERN, max_length=16)
    role: UserRole = UserRole.SALESPERSON
    manager_id: Optional[int] = None


class LoginRequest(BaseModel):
    """User login request schema"""

    model_config = ConfigDict(
        json_schema_extra={'example': {'email': 'sales@example.com', 'password': 'P@ssw0rd'}}
    )

    email: EmailStr
    password: SecretStr = Field(
        ..., min_length=1, max_length=72, description='User password (max 72 chars)'
    )


class UserResponse(BaseModel):
    """User response schema"""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'id': 2,
                'email': 'sales@example.com',
                'name': 'Sam Sales',
                'address': '221B Baker Street, London',
                'phone_number': '+442071234567',
                'role': 'salesperson',
                'manager_id': 1,
                'is_active': True,
            }
        },
    )

    id: int
    email: str
    name: str
    address: str
    phone_number: str
    role: UserRole
    manager_id: Optional[int] = None
    is_active: bool
