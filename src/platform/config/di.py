"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.auditorium.domain.refund_policy import RefundPolicy
from src.service.auditorium.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl
from src.service.auditorium.driven_adapter.repo.show_query_repo_impl import ShowQueryRepoImpl
from src.service.auditorium.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.auditorium.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.auditorium.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.auditorium.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager, one engine per event loop)
    database = providers.Singleton(Database)

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)

    # Read repositories (stateless - use session_factory per-request)
    # Write repositories for shows/bookings live on the Unit of Work session
    show_query_repo = providers.Singleton(
        ShowQueryRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl,
        session_factory=database.provided.session,
        password_hasher=password_hasher,
    )

    # Domain policy
    refund_policy = providers.Singleton(RefundPolicy)

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()
