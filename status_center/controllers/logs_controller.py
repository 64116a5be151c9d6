from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from ..extensions import db
from ..schemas.log_schema import LogEventIn
from ..services.suite_logger import get_suite_logger
from .auth_controller import admin_required

logs_bp = Blueprint("logs", __name__, url_prefix="/api/logs")

TRUTHY = ("1", "true", "yes", "on")


def _to_int(v: str | None):
    if v is None:
        return None
    v = str(v).strip()
    if not v:
        return None
    try:
        return int(v)
    except ValueError:
        return None


def _confirmed() -> bool:
    if request.is_json:
        body = request.get_json(silent=True)
        value = body.get("confirm") if isinstance(body, dict) else None
        if isinstance(value, bool):
            return value
    else:
        value = request.form.get("confirm")
    return str(value or "").strip().lower() in TRUTHY


@logs_bp.get("/")
@admin_required
def recent_logs():
    """
    Log viewer feed.

    Query params:
    - limit: max rows (never above LOG_VIEW_LIMIT, default 200)
    - source: exact source name
    """
    limit = _to_int(request.args.get("limit"))
    source = (request.args.get("source") or "").strip() or None

    try:
        rows = get_suite_logger().fetch_recent(limit=limit, source=source)
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("LOG_VIEWER fetch failed")
        return jsonify({"success": False, "error": str(e)}), 500

    return jsonify({
        "success": True,
        "count": len(rows),
        "data": [r.to_dict() for r in rows],
    })


@logs_bp.post("/clear")
@admin_required
def clear_logs():
    if not _confirmed():
        return jsonify({"success": False, "error": "confirmation required"}), 400

    try:
        deleted = get_suite_logger().clear()
    except Exception as e:
        current_app.logger.exception("LOG_VIEWER clear failed")
        return jsonify({"success": False, "error": str(e)}), 500

    return jsonify({"success": True, "deleted": deleted})


@logs_bp.post("/")
def ingest_log():
    """Remote suite components post here; same gating as in-process callers."""
    try:
        payload = LogEventIn.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return jsonify({"success": False, "error": e.errors(include_url=False)}), 400

    get_suite_logger().log(payload.source, payload.message, payload.level)
    return jsonify({"success": True})
