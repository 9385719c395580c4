"""Mapper for Webinar ORM ↔ Domain conversion."""

from datetime import UTC, datetime

from webinar_backend.domain.common.value_objects.ids import UserId, WebinarId
from webinar_backend.domain.webinars.entities.webinar import Webinar
from webinar_backend.models import Webinar as WebinarORM


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo; stored values are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class WebinarMapper:
    """Mapper for Webinar ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: WebinarORM) -> Webinar:
        """Convert ORM model to domain entity."""
        return Webinar(
            id=WebinarId(orm_model.id),
            organizer_id=UserId(orm_model.organizer_id),
            title=orm_model.title,
            start_date=_as_utc(orm_model.start_date),
            end_date=_as_utc(orm_model.end_date),
            seats=orm_model.seats,
        )

    def to_orm(self, domain_entity: Webinar, orm_model: WebinarORM | None = None) -> WebinarORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing; id and organizer never change
            orm_model.title = domain_entity.title
            orm_model.start_date = domain_entity.start_date
            orm_model.end_date = domain_entity.end_date
            orm_model.seats = domain_entity.seats
            return orm_model

        # Create new
        return WebinarORM(
            id=domain_entity.id.value,
            organizer_id=domain_entity.organizer_id.value,
            title=domain_entity.title,
            start_date=domain_entity.start_date,
            end_date=domain_entity.end_date,
            seats=domain_entity.seats,
        )
