"""Tests for container wiring and the use case scope."""

from collections.abc import Generator

import pytest

from tests.conftest import create_test_webinar
from webinar_backend import core
from webinar_backend.application.webinars.use_cases.change_seats_use_case import (
    ChangeSeatsUseCase,
)
from webinar_backend.config import Settings
from webinar_backend.core import bootstrap, container
from webinar_backend.database import Base, dispose_engine, get_db, get_engine
from webinar_backend.domain.common.value_objects.ids import WebinarId
from webinar_backend.domain.identity.entities.user import User
from webinar_backend.infrastructure.common.di import use_case_scope
from webinar_backend.infrastructure.webinars.repositories.webinar_repository import (
    WebinarRepository,
)


@pytest.fixture
def bootstrapped(monkeypatch: pytest.MonkeyPatch) -> Generator[list[str], None, None]:
    """Bootstrap against in-memory SQLite, recording the logging environment."""
    environments: list[str] = []
    monkeypatch.setattr(core, "configure_logging", environments.append)

    bootstrap(Settings(DATABASE_URL="sqlite://", ENVIRONMENT="test"))
    Base.metadata.create_all(bind=get_engine())
    try:
        yield environments
    finally:
        dispose_engine()


def test_bootstrap_configures_logging_and_database(bootstrapped: list[str]) -> None:
    assert bootstrapped == ["test"]
    assert get_engine().dialect.name == "sqlite"


def test_get_engine_requires_initialization() -> None:
    dispose_engine()

    with pytest.raises(RuntimeError, match="Database not initialized"):
        get_engine()


@pytest.mark.usefixtures("bootstrapped")
def test_use_case_scope_resolves_wired_use_case(alice: User) -> None:
    with get_db() as db:
        WebinarRepository(db).create(create_test_webinar(organizer_id="alice", seats=100))

    with use_case_scope(container.change_seats_use_case) as use_case:
        assert isinstance(use_case, ChangeSeatsUseCase)
        assert isinstance(use_case.webinar_repository, WebinarRepository)
        use_case.execute(user=alice, webinar_id="webinar-id", seats=250)

    with get_db() as db:
        webinar = WebinarRepository(db).find_by_id(WebinarId("webinar-id"))

    assert webinar is not None
    assert webinar.seats == 250


@pytest.mark.usefixtures("bootstrapped")
def test_use_case_scope_resets_db_override() -> None:
    with use_case_scope(container.webinar_repository):
        pass

    assert not container.db.overridden
