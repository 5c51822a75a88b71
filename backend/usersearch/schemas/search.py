"""Search resource schemas shared by the API and the client."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, pre_load, validate

from usersearch.services._shared.dto import SearchIn, User


class LenientInteger(fields.Integer):
    """Integer field decoding unparsable input as ``0``."""

    def _deserialize(self, value: Any, attr: str | None, data: Any, **kwargs: Any) -> int:
        try:
            return super()._deserialize(value, attr, data, **kwargs)
        except ValidationError:
            return 0


class SearchQuerySchema(Schema):
    """Parse ``/search`` query parameters into a :class:`SearchIn`.

    Empty parameters count as absent. ``limit`` must be a non-negative integer;
    ``offset`` and ``order_by`` fall back to ``0`` when they cannot be parsed.
    A negative ``offset`` is left for :class:`SearchService` to reject.
    """

    class Meta:
        unknown = EXCLUDE

    def __init__(self, *, default_limit: int = 25, **kwargs: Any) -> None:
        self._default_limit = default_limit
        super().__init__(**kwargs)

    query = fields.String(load_default="")
    limit = fields.Integer(validate=validate.Range(min=0))
    offset = LenientInteger(load_default=0)
    order_by = LenientInteger(load_default=0)
    order_field = fields.String(load_default="id")

    @pre_load
    def drop_empty(self, data: Any, **_: Any) -> dict[str, Any]:
        return {key: value for key, value in data.items() if value != ""}

    @post_load
    def make_dto(self, data: dict[str, Any], **_: Any) -> SearchIn:
        data.setdefault("limit", self._default_limit)
        return SearchIn(**data)


class UserSchema(Schema):
    """Wire representation of a user: ``{Id, Name, Age, About, Gender}``."""

    class Meta:
        ordered = True
        unknown = EXCLUDE

    id = fields.Integer(required=True, data_key="Id")
    name = fields.String(required=True, data_key="Name")
    age = fields.Integer(required=True, data_key="Age")
    about = fields.String(load_default="", data_key="About")
    gender = fields.String(load_default="", data_key="Gender")

    @post_load
    def make_user(self, data: dict[str, Any], **_: Any) -> User:
        return User(**data)


class SearchErrorResponseSchema(Schema):
    """Structured ``400`` body: ``{"Error": "..."}``."""

    class Meta:
        unknown = EXCLUDE

    error = fields.String(required=True, data_key="Error")
