from webinar_backend.domain.common.value_objects.ids import UserId
from webinar_backend.domain.identity.entities.user import User


def test_create_user() -> None:
    """Test creating a user with a generated identifier."""
    user = User.create()

    assert user.id.value
    assert user != User.create()


def test_users_with_same_id_are_equal() -> None:
    """Test that identity defines equality."""
    assert User(id=UserId("alice")) == User(id=UserId("alice"))
    assert hash(User(id=UserId("alice"))) == hash(User(id=UserId("alice")))


def test_users_with_different_ids_are_not_equal() -> None:
    assert User(id=UserId("alice")) != User(id=UserId("bob"))
