"""
Cookie JWT authentication
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError, ForbiddenError
from src.service.auditorium.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.auditorium.domain.entity.user_entity import UserEntity, UserRole


AUTH_COOKIE_NAME = 'fastapiusersauth'


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_days = settings.ACCESS_TOKEN_EXPIRE_DAYS

    @property
    def max_age_seconds(self) -> int:
        return self.token_expire_days * 24 * 60 * 60

    def create_jwt_token(self, user_entity: UserEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.id),
            'exp': now + timedelta(days=self.token_expire_days),
            'iat': now,
            'user_id': user_entity.id,
            'email': user_entity.email,
            'name': user_entity.name,
            'address': user_entity.address,
            'phone_number': user_entity.phone_number,
            'role': user_entity.role.value,
            'manager_id': user_entity.manager_id,
            'is_active': user_entity.is_active,
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid token')

    async def authenticate_user(
        self, user_query_repo: IUserQueryRepo, email: str, password: str
    ) -> UserEntity:
        user_entity = await user_query_repo.verify_password(email=email, plain_password=password)
        validated_user = UserEntity.validate_user_exists(user_entity)
        validated_user.validate_active()

        return validated_user

    def get_current_user_info_from_jwt(self, token: Optional[str]) -> UserEntity:
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)

        user_id = payload.get('user_id')
        email = payload.get('email')
        name = payload.get('name')
        role = payload.get('role')
        is_active = payload.get('is_active')

        if not user_id or not email or not name or not role or is_active is None:
            raise AuthenticationError('Invalid token')

        try:
            user_role = UserRole(role)
        except ValueError:
            raise AuthenticationError('Invalid token')

        # Rebuild UserEntity from JWT payload (no DB query)
        user_entity = UserEntity(
            id=user_id,
            email=email,
            name=name,
            address=payload.get('address', ''),
            phone_number=payload.get('phone_number', ''),
            role=user_role,
            manager_id=payload.get('manager_id'),
            is_active=is_active,
        )

        if not user_entity.is_active:
            raise ForbiddenError('User is inactive')

        return user_entity
