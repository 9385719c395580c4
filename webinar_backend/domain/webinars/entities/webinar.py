"""Webinar entity."""

from dataclasses import dataclass, fields, replace
from datetime import datetime

from webinar_backend.domain.common.entity import Entity
from webinar_backend.domain.common.exceptions import ValidationError
from webinar_backend.domain.common.value_objects.ids import UserId, WebinarId
from webinar_backend.domain.identity.entities.user import User

# Domain constraints
MIN_SEATS = 1
MAX_SEATS = 1000


@dataclass(frozen=True)
class WebinarChanges:
    """Changeset for a webinar. Fields left as None are not modified."""

    title: str | None = None
    seats: int | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None

    def provided(self) -> dict[str, object]:
        """Return only the fields that carry a new value."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(eq=False)
class Webinar(Entity[WebinarId]):
    """
    Webinar organized by a single user.

    Business Rules:
    - Seats are bounded to [MIN_SEATS, MAX_SEATS]
    - Seats can only grow through update()
    - Only the organizer may modify the webinar (checked by use cases via is_organizer)
    """

    # Identity
    id: WebinarId
    organizer_id: UserId

    # Content
    title: str

    # Schedule
    start_date: datetime
    end_date: datetime

    # Capacity
    seats: int

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.has_not_enough_seats():
            raise ValidationError(
                f"Webinar must have at least {MIN_SEATS} seat", field="seats", value=self.seats
            )
        if self.has_too_many_seats():
            raise ValidationError(
                f"Webinar must have at most {MAX_SEATS} seats", field="seats", value=self.seats
            )
        if self.start_date.tzinfo is None:
            raise ValidationError(
                "Start date must be timezone-aware", field="start_date", value=self.start_date
            )
        if self.end_date.tzinfo is None:
            raise ValidationError(
                "End date must be timezone-aware", field="end_date", value=self.end_date
            )

    # Query methods
    def is_organizer(self, user: User) -> bool:
        return self.organizer_id == user.id

    def has_too_many_seats(self) -> bool:
        return self.seats > MAX_SEATS

    def has_not_enough_seats(self) -> bool:
        return self.seats < MIN_SEATS

    # Command methods
    def update(self, changes: WebinarChanges) -> None:
        """
        Apply a changeset to the webinar.

        The merged state is validated before anything is assigned, so a
        rejected changeset leaves the webinar untouched.

        Args:
            changes: Fields to modify

        Raises:
            ValidationError: If seats would decrease or exceed MAX_SEATS
        """
        if changes.seats is not None and changes.seats < self.seats:
            raise ValidationError(
                "You cannot reduce the number of seats", field="seats", value=changes.seats
            )

        provided = changes.provided()
        merged = replace(self, **provided)

        for name in provided:
            setattr(self, name, getattr(merged, name))

    # Factory methods
    @classmethod
    def create(
        cls,
        organizer_id: UserId,
        title: str,
        start_date: datetime,
        end_date: datetime,
        seats: int,
    ) -> "Webinar":
        """Factory for organizing a new webinar with a generated identifier."""
        return cls(
            id=WebinarId.generate(),
            organizer_id=organizer_id,
            title=title.strip(),
            start_date=start_date,
            end_date=end_date,
            seats=seats,
        )
