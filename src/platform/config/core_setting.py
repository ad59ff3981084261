from decimal import Decimal
import json
from pathlib import Path
from typing import Annotated, List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Auditorium Booking'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7
    ALGORITHM: str = 'HS256'

    # CORS
    # NoDecode hands the raw env string to the validator instead of JSON-decoding it
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.strip().startswith('['):
            return json.loads(v)
        elif isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'auditorium_booking'

    # Full URL override (e.g. sqlite+aiosqlite:///./local.db for tests)
    DATABASE_URL: Optional[str] = None

    # Connection pool (ignored for SQLite)
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:'
            f'{self.POSTGRES_PASSWORD.get_secret_value()}@'
            f'{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )

    # Booking rules
    COMMISSION_RATE: Decimal = Decimal('0.05')
    REFUND_BOOKING_FEE: Decimal = Decimal('5')
    REFUND_BALCONY_DEDUCTION: Decimal = Decimal('15')
    REFUND_ORDINARY_DEDUCTION: Decimal = Decimal('10')
    REFUND_SAME_DAY_RATIO: Decimal = Decimal('0.5')
    ENFORCE_UNIQUE_SEAT_NUMBER: bool = True

    # Tracing
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None
    OTEL_CONSOLE_EXPORT: bool = False


settings = Settings()  # type: ignore
