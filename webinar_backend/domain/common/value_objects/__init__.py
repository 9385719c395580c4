"""Common value objects shared across all domain modules."""

from .ids import UserId, WebinarId

__all__ = [
    "UserId",
    "WebinarId",
]
