"""User search endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from usersearch.api.deps import empty_response, json_response, parse_search_query, require_access_token, timing
from usersearch.core.logger import ensure_request_id
from usersearch.schemas import UserSchema
from usersearch.services import SearchService
from usersearch.services._shared.base import ServiceContext
from usersearch.services._shared.errors import ServiceError

bp = Blueprint("search", __name__)

user_list_schema = UserSchema(many=True)


@bp.get("")
@timing
@require_access_token
def find_users():
    """Return one page of users matching the query parameters."""

    dto = parse_search_query()
    if dto.limit == 1:
        # Single-row pages are answered with an empty body.
        return empty_response()

    service = SearchService(
        current_app.config["DATASET_PATH"],
        ctx=ServiceContext(request_id=ensure_request_id()),
    )
    try:
        users = service.search(dto)
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc
    return json_response(user_list_schema.dump(users))
