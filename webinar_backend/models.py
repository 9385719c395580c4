"""Database models."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from webinar_backend.database import Base


class Webinar(Base):
    """Webinar model for storing organized webinars."""

    __tablename__ = "webinars"
    __table_args__ = (
        CheckConstraint("seats >= 1 AND seats <= 1000", name="ck_webinars_seats_range"),
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    organizer_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    seats: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        """String representation of Webinar."""
        return f"<Webinar(id={self.id}, title='{self.title[:50]}', seats={self.seats})>"
