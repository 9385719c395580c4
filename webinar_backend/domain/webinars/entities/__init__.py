from webinar_backend.domain.webinars.entities.webinar import (
    MAX_SEATS,
    MIN_SEATS,
    Webinar,
    WebinarChanges,
)

__all__ = [
    "MAX_SEATS",
    "MIN_SEATS",
    "Webinar",
    "WebinarChanges",
]
