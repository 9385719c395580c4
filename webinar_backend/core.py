from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from webinar_backend.application.webinars.use_cases.change_seats_use_case import (
    ChangeSeatsUseCase,
)
from webinar_backend.config import Settings, configure_logging, get_settings
from webinar_backend.database import initialize_database
from webinar_backend.infrastructure.webinars.repositories.webinar_repository import (
    WebinarRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    webinar_repository = providers.Factory(WebinarRepository, db=db)

    # Webinars module, application use cases
    change_seats_use_case = providers.Factory(
        ChangeSeatsUseCase,
        webinar_repository=webinar_repository,
    )


# Initialize container
container = Container()


def bootstrap(settings: Settings | None = None) -> Container:
    """Configure logging and the database, then return the application container."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    return container
