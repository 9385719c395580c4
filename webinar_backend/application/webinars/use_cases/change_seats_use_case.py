"""Use case for changing the number of seats of a webinar."""

import structlog

from webinar_backend.application.webinars.protocols.webinar_repository import (
    WebinarRepositoryProtocol,
)
from webinar_backend.domain.common.exceptions import AuthorizationError
from webinar_backend.domain.common.value_objects.ids import WebinarId
from webinar_backend.domain.identity.entities.user import User
from webinar_backend.domain.webinars.entities.webinar import WebinarChanges
from webinar_backend.exceptions import WebinarNotFoundError

logger = structlog.get_logger(__name__)


class ChangeSeatsUseCase:
    """Use case for changing the number of seats of a webinar."""

    def __init__(self, webinar_repository: WebinarRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.webinar_repository = webinar_repository

    def execute(self, user: User, webinar_id: str, seats: int) -> None:
        """
        Change the number of seats of a webinar owned by the user.

        Args:
            user: The user requesting the change
            webinar_id: ID of the webinar to update
            seats: The new number of seats

        Raises:
            WebinarNotFoundError: If the webinar does not exist
            AuthorizationError: If the user is not the organizer of the webinar
            ValidationError: If seats decrease or exceed the maximum
        """
        try:
            webinar_id_vo = WebinarId(webinar_id)
        except ValueError as e:
            raise WebinarNotFoundError(webinar_id) from e

        webinar = self.webinar_repository.find_by_id(webinar_id_vo)
        if not webinar:
            raise WebinarNotFoundError(webinar_id)

        if not webinar.is_organizer(user):
            raise AuthorizationError("User is not allowed to update this webinar")

        previous_seats = webinar.seats
        webinar.update(WebinarChanges(seats=seats))
        self.webinar_repository.update(webinar)

        logger.info(
            "webinar_seats_changed",
            webinar_id=webinar_id,
            user_id=user.id.value,
            previous_seats=previous_seats,
            seats=seats,
        )
