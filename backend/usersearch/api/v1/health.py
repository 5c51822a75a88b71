"""Health check endpoint."""

from __future__ import annotations

from pathlib import Path

from flask import Blueprint, current_app

from usersearch.api.deps import json_response, timing

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application and dataset health information."""

    dataset_status = "ok" if Path(current_app.config["DATASET_PATH"]).is_file() else "fail"
    if dataset_status == "fail":
        current_app.logger.warning("healthcheck.dataset_missing")
    version = current_app.config.get("APP_VERSION", "dev")
    payload = {"status": "ok", "dataset": dataset_status, "version": version}
    return json_response(payload)
