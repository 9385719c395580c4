"""Webinar domain exceptions."""

from webinar_backend.domain.common.exceptions import DomainError


class WebinarAlreadyExistsError(DomainError):
    """Raised when creating a webinar whose identifier is already taken."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(f"Webinar {webinar_id} already exists", {"webinar_id": webinar_id})
        self.webinar_id = webinar_id
