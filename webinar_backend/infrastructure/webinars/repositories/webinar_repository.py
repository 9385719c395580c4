"""Repository for Webinar domain entities."""

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from webinar_backend.domain.common.value_objects.ids import WebinarId
from webinar_backend.domain.webinars.entities.webinar import Webinar
from webinar_backend.domain.webinars.exceptions import WebinarAlreadyExistsError
from webinar_backend.exceptions import WebinarNotFoundError
from webinar_backend.infrastructure.webinars.mappers.webinar_mapper import WebinarMapper
from webinar_backend.models import Webinar as WebinarORM

logger = structlog.get_logger(__name__)


class WebinarRepository:
    """Repository for Webinar domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = WebinarMapper()

    def create(self, webinar: Webinar) -> None:
        """
        Persist a new webinar.

        Args:
            webinar: The webinar entity to store

        Raises:
            WebinarAlreadyExistsError: If a webinar with the same ID is stored
        """
        if self.db.get(WebinarORM, webinar.id.value) is not None:
            raise WebinarAlreadyExistsError(webinar.id.value)

        self.db.add(self.mapper.to_orm(webinar))
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise WebinarAlreadyExistsError(webinar.id.value) from e

        logger.debug("webinar_created", webinar_id=webinar.id.value)

    def update(self, webinar: Webinar) -> None:
        """
        Overwrite the stored webinar that has the same ID.

        Args:
            webinar: The webinar entity carrying the new state

        Raises:
            WebinarNotFoundError: If no webinar with that ID is stored
        """
        orm_model = self.db.get(WebinarORM, webinar.id.value)
        if not orm_model:
            raise WebinarNotFoundError(webinar.id.value)

        self.mapper.to_orm(webinar, orm_model)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise

        logger.debug("webinar_updated", webinar_id=webinar.id.value)

    def find_by_id(self, webinar_id: WebinarId) -> Webinar | None:
        """
        Find a webinar by ID.

        Args:
            webinar_id: The webinar ID

        Returns:
            Webinar entity if found, None otherwise
        """
        stmt = select(WebinarORM).where(WebinarORM.id == webinar_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None
