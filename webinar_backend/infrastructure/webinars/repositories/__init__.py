from webinar_backend.infrastructure.webinars.repositories.in_memory_webinar_repository import (
    InMemoryWebinarRepository,
)
from webinar_backend.infrastructure.webinars.repositories.webinar_repository import (
    WebinarRepository,
)

__all__ = [
    "InMemoryWebinarRepository",
    "WebinarRepository",
]
