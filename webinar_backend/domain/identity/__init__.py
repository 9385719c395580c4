"""Identity domain layer."""

from webinar_backend.domain.identity.entities.user import User

__all__ = ["User"]
