from dependency_injector import containers, providers

from registrar.core.database.session import DatabaseManager
from registrar.core.validation import Validator
from registrar.repositories.users import UserRepository
from registrar.services.auth import AuthService
from registrar.services.users import UsersService


def signup_rules(email_min: int, email_max: int, password_min: int, password_max: int) -> dict:
    return {
        "email": ["required", f"min:{email_min}", f"max:{email_max}", "email"],
        "password": ["required", f"min:{password_min}", f"max:{password_max}", "no_null"],
    }


class GatewayContainer(containers.DeclarativeContainer):
    config = providers.Configuration()

    database_manager = providers.Singleton(
        DatabaseManager,
        database_uri=config.DATABASE_URI,
        echo=config.SQL_ECHO,
    )


class RepositoriesContainer(containers.DeclarativeContainer):
    gateways = providers.DependenciesContainer()

    users_repository = providers.Factory(
        UserRepository,
        session_factory=gateways.database_manager.provided.session,
    )


class ServicesContainer(containers.DeclarativeContainer):
    config = providers.Configuration()
    repositories = providers.DependenciesContainer()

    auth_service = providers.Singleton(
        AuthService,
        rounds=config.BCRYPT_ROUNDS,
    )

    signup_validator = providers.Singleton(
        Validator,
        rules=providers.Callable(
            signup_rules,
            email_min=config.EMAIL_MIN_LENGTH,
            email_max=config.EMAIL_MAX_LENGTH,
            password_min=config.PASSWORD_MIN_LENGTH,
            password_max=config.PASSWORD_MAX_LENGTH,
        ),
    )

    users_service = providers.Singleton(
        UsersService,
        users_repository=repositories.users_repository,
        auth_service=auth_service,
        validator=signup_validator,
    )


class ApplicationContainer(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(
        modules=[
            "registrar.api.endpoints.users",
        ]
    )

    config = providers.Configuration()

    gateways = providers.Container(
        GatewayContainer,
        config=config,
    )

    repositories = providers.Container(
        RepositoriesContainer,
        gateways=gateways,
    )

    services = providers.Container(
        ServicesContainer,
        config=config,
        repositories=repositories,
    )
