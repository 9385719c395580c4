"""In-memory repository for Webinar domain entities."""

from copy import deepcopy

from webinar_backend.domain.common.value_objects.ids import WebinarId
from webinar_backend.domain.webinars.entities.webinar import Webinar
from webinar_backend.domain.webinars.exceptions import WebinarAlreadyExistsError
from webinar_backend.exceptions import WebinarNotFoundError


class InMemoryWebinarRepository:
    """
    Dictionary-backed webinar repository.

    Entities are copied on the way in and on the way out, so a caller
    mutating a loaded webinar never changes stored state without update().
    """

    def __init__(self, webinars: list[Webinar] | None = None) -> None:
        self._webinars: dict[WebinarId, Webinar] = {
            webinar.id: deepcopy(webinar) for webinar in webinars or []
        }

    def create(self, webinar: Webinar) -> None:
        if webinar.id in self._webinars:
            raise WebinarAlreadyExistsError(webinar.id.value)
        self._webinars[webinar.id] = deepcopy(webinar)

    def update(self, webinar: Webinar) -> None:
        if webinar.id not in self._webinars:
            raise WebinarNotFoundError(webinar.id.value)
        self._webinars[webinar.id] = deepcopy(webinar)

    def find_by_id(self, webinar_id: WebinarId) -> Webinar | None:
        webinar = self._webinars.get(webinar_id)
        return deepcopy(webinar) if webinar else None

    def __len__(self) -> int:
        return len(self._webinars)
