"""Webinars domain layer."""

from webinar_backend.domain.webinars.entities.webinar import Webinar, WebinarChanges
from webinar_backend.domain.webinars.exceptions import WebinarAlreadyExistsError

__all__ = [
    "Webinar",
    "WebinarAlreadyExistsError",
    "WebinarChanges",
]
