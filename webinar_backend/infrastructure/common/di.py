from collections.abc import Generator
from contextlib import contextmanager
from typing import TypeVar

from dependency_injector.providers import Provider

from webinar_backend.core import container
from webinar_backend.database import get_db

T = TypeVar("T")


@contextmanager
def use_case_scope(provider: Provider[T]) -> Generator[T, None, None]:
    """
    Resolve a container provider against a fresh database session.

    The container's db dependency is overridden for the duration of the
    block, and the session is closed afterwards.

    Example:
        with use_case_scope(container.change_seats_use_case) as use_case:
            use_case.execute(user=alice, webinar_id="webinar-id", seats=200)
    """
    with get_db() as db:
        container.db.override(db)
        try:
            yield provider()
        finally:
            # Reset override after the block completes
            container.db.reset_override()
