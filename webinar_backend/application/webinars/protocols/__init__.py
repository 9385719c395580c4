from webinar_backend.application.webinars.protocols.webinar_repository import (
    WebinarRepositoryProtocol,
)

__all__ = ["WebinarRepositoryProtocol"]
