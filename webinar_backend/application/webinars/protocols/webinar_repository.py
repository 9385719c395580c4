"""Protocol for Webinar repository."""

from typing import Protocol

from webinar_backend.domain.common.value_objects.ids import WebinarId
from webinar_backend.domain.webinars.entities.webinar import Webinar


class WebinarRepositoryProtocol(Protocol):
    """Protocol for Webinar repository operations."""

    def create(self, webinar: Webinar) -> None:
        """
        Persist a new webinar.

        Args:
            webinar: The webinar entity to store

        Raises:
            WebinarAlreadyExistsError: If a webinar with the same ID is stored
        """
        ...

    def update(self, webinar: Webinar) -> None:
        """
        Overwrite the stored webinar that has the same ID.

        Args:
            webinar: The webinar entity carrying the new state

        Raises:
            WebinarNotFoundError: If no webinar with that ID is stored
        """
        ...

    def find_by_id(self, webinar_id: WebinarId) -> Webinar | None:
        """
        Find a webinar by ID.

        Args:
            webinar_id: The webinar ID

        Returns:
            Webinar entity if found, None otherwise
        """
        ...
