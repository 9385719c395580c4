"""Tests for strongly-typed identifiers."""

import pytest

from webinar_backend.domain.common.value_objects.ids import UserId, WebinarId


class TestEntityIds:
    def test_equal_values_are_equal(self) -> None:
        assert WebinarId("webinar-id") == WebinarId("webinar-id")
        assert hash(WebinarId("webinar-id")) == hash(WebinarId("webinar-id"))

    def test_different_id_types_never_match(self) -> None:
        assert UserId("same") != WebinarId("same")

    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty_value_rejected(self, value: str) -> None:
        with pytest.raises(ValueError, match="WebinarId cannot be empty"):
            WebinarId(value)

    def test_generate_returns_distinct_ids(self) -> None:
        assert WebinarId.generate() != WebinarId.generate()

    def test_str_returns_value(self) -> None:
        assert str(WebinarId("webinar-id")) == "webinar-id"
