"""User entity for identity management."""

from dataclasses import dataclass

from webinar_backend.domain.common.entity import Entity
from webinar_backend.domain.common.value_objects.ids import UserId


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity representing the caller of a use case.

    Authentication is handled outside this service; a User is trusted as given.
    """

    id: UserId

    @classmethod
    def create(cls) -> "User":
        """Create a new user with a generated identifier."""
        return cls(id=UserId.generate())
