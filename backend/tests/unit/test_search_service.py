from __future__ import annotations

import logging

import pytest

from usersearch.core import errors as api_errors
from usersearch.core.config import DEFAULT_DATASET_PATH
from usersearch.services import SearchService
from usersearch.services._shared.dto import SearchIn, User
from usersearch.services._shared.errors import (
    ERROR_BAD_ORDER_FIELD,
    ERROR_UNKNOWN,
    DatasetError,
    InvalidOrderByError,
    InvalidOrderFieldError,
    NegativeOffsetError,
    OffsetOutOfRangeError,
)
from usersearch.services.search_service import filter_users, paginate, validate_order


def _users(n: int) -> list[User]:
    return [User(id=i, name=f"User {i}", age=20 + i, about=f"About {i}", gender="male") for i in range(n)]


class TestFilterUsers:
    """Case-insensitive substring matching over name and about."""

    def test_empty_query_keeps_everyone(self):
        users = _users(3)
        assert filter_users(users, "") == users

    def test_matches_name_ignoring_case(self):
        users = [
            User(id=0, name="Glenn Jordan", age=29, about="x", gender="male"),
            User(id=1, name="Boyd Wolf", age=22, about="y", gender="male"),
        ]
        assert [u.id for u in filter_users(users, "gLeNn")] == [0]

    def test_matches_about_and_keeps_order(self):
        users = [
            User(id=0, name="A", age=1, about="Lorem IPSUM", gender="f"),
            User(id=1, name="B", age=1, about="dolor", gender="f"),
            User(id=2, name="C", age=1, about="ipsum dolor", gender="f"),
        ]
        assert [u.id for u in filter_users(users, "ipsum")] == [0, 2]


class TestPaginate:
    """Skip-then-take windowing."""

    def test_window(self):
        assert [u.id for u in paginate(_users(10), offset=2, limit=3)] == [2, 3, 4]

    def test_right_edge_is_clamped(self):
        assert [u.id for u in paginate(_users(5), offset=3, limit=10)] == [3, 4]

    def test_zero_offset_on_empty_is_empty(self):
        assert paginate([], offset=0, limit=10) == []

    @pytest.mark.parametrize("offset", [5, 6, 100])
    def test_offset_past_end(self, offset):
        with pytest.raises(OffsetOutOfRangeError):
            paginate(_users(5), offset=offset, limit=10)


class TestValidateOrder:
    """Ordering is validated but never applied."""

    @pytest.mark.parametrize("field", ["id", "age", "name"])
    @pytest.mark.parametrize("direction", [-1, 0, 1])
    def test_accepted(self, field, direction):
        validate_order(field, direction)

    @pytest.mark.parametrize("direction", [2, -2, 10])
    def test_bad_direction(self, direction):
        with pytest.raises(InvalidOrderByError):
            validate_order("id", direction)

    def test_about_is_rejected(self):
        with pytest.raises(InvalidOrderFieldError) as info:
            validate_order("about", 0)
        assert info.value.error == ERROR_BAD_ORDER_FIELD

    def test_unknown_field(self):
        with pytest.raises(InvalidOrderFieldError) as info:
            validate_order("email", 0)
        assert info.value.error == ERROR_UNKNOWN

    def test_direction_checked_before_field(self):
        with pytest.raises(InvalidOrderByError):
            validate_order("about", 2)


class TestSearchService:
    """Validate the full search pipeline against dataset files."""

    @pytest.fixture()
    def service(self) -> SearchService:
        return SearchService(DEFAULT_DATASET_PATH)

    def test_query_finds_glenn_jordan(self, service):
        users = service.search(SearchIn(query="cillum cupidatat sit", limit=25))
        assert users and users[0].name == "Glenn Jordan"

    def test_limit_and_offset(self, service):
        users = service.search(SearchIn(limit=10, offset=5))
        assert [u.id for u in users] == list(range(5, 15))

    def test_ordering_is_a_no_op(self, service):
        plain = service.search(SearchIn(limit=10))
        ordered = service.search(SearchIn(limit=10, order_field="age", order_by=-1))
        assert ordered == plain

    def test_offset_beyond_matches(self, service):
        with pytest.raises(OffsetOutOfRangeError):
            service.search(SearchIn(query="cillum", limit=5, offset=13))

    def test_missing_dataset(self, tmp_path):
        with pytest.raises(DatasetError):
            SearchService(tmp_path / "none.xml").search(SearchIn())

    def test_negative_offset_is_checked_before_loading(self, tmp_path):
        with pytest.raises(NegativeOffsetError):
            SearchService(tmp_path / "none.xml").search(SearchIn(offset=-1))

    def test_logs_page_counts(self, service, caplog):
        with caplog.at_level(logging.DEBUG, logger="usersearch.services.search_service"):
            service.search(SearchIn(query="cillum", limit=5))
        record = next(r for r in caplog.records if r.getMessage().startswith("search.done"))
        assert (record.matches, record.users) == (13, 5)

    def test_idempotent(self, service):
        dto = SearchIn(query="mollit", limit=5, offset=1)
        assert service.search(dto) == service.search(dto)


class TestTranslateExceptions:
    """Domain errors map onto wire responses."""

    @pytest.fixture()
    def service(self) -> SearchService:
        return SearchService(DEFAULT_DATASET_PATH)

    def test_offset_is_fatal(self, service):
        err = service.translate_exceptions(OffsetOutOfRangeError(offset=9, available=3))
        assert isinstance(err, api_errors.ServerFatal)
        assert err.status_code == 500

    def test_dataset_is_fatal(self, service):
        err = service.translate_exceptions(DatasetError(path="x", detail="y"))
        assert isinstance(err, api_errors.ServerFatal)

    def test_order_field_carries_error(self, service):
        err = service.translate_exceptions(InvalidOrderFieldError("about", ERROR_BAD_ORDER_FIELD))
        assert isinstance(err, api_errors.BadRequest)
        assert (err.status_code, err.error) == (400, ERROR_BAD_ORDER_FIELD)

    def test_order_by_has_no_body(self, service):
        err = service.translate_exceptions(InvalidOrderByError(order_by=2))
        assert isinstance(err, api_errors.BadRequest)
        assert err.error is None and err.message == ""

    def test_negative_offset_has_no_body(self, service):
        err = service.translate_exceptions(NegativeOffsetError(offset=-1))
        assert isinstance(err, api_errors.BadRequest)
        assert err.error is None and err.message == ""

    def test_other_exceptions_pass_through(self, service):
        exc = RuntimeError("boom")
        assert service.translate_exceptions(exc) is exc
