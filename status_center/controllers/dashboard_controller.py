from flask import Blueprint, current_app, jsonify, request

from ..extensions import db
from ..schemas.settings_schema import ALLOWED_LEVELS
from ..services.settings_service import SettingsService
from ..services.suite_logger import get_suite_logger
from .auth_controller import admin_required

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/api")
settings_svc = SettingsService()

LEVEL_LABELS = {
    "debug": "Full Debug (Logs Everything)",
    "info": "Standard (Info, Warnings & Errors)",
    "warning": "Warnings & Errors Only",
    "error": "Errors Only",
}


def _settings_payload():
    return {
        "log_level": settings_svc.minimum_level(),
        "options": [{"value": lvl, "label": LEVEL_LABELS[lvl]} for lvl in ALLOWED_LEVELS],
    }


@dashboard_bp.get("/status")
@admin_required
def suite_status():
    """
    At-a-glance view of the suite:
    - plugins: name/version/active/metrics per registered plugin
    - settings: current minimum log level
    - log_counts: stored entries per level
    """
    registry = current_app.extensions["plugin_registry"]

    try:
        counts = get_suite_logger().counts()
        settings = _settings_payload()
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("DASHBOARD status failed")
        return jsonify({"success": False, "error": str(e)}), 500

    return jsonify({
        "success": True,
        "plugins": registry.status(),
        "settings": settings,
        "log_counts": counts,
    })


@dashboard_bp.get("/settings")
@admin_required
def get_settings():
    return jsonify({"success": True, "settings": _settings_payload()})


@dashboard_bp.post("/settings")
@admin_required
def save_settings():
    if request.is_json:
        body = request.get_json(silent=True)
        raw = body.get("log_level") if isinstance(body, dict) else None
    else:
        raw = request.form.get("log_level")

    try:
        saved = settings_svc.save_minimum_level(raw)
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("SETTINGS save failed")
        return jsonify({"success": False, "error": str(e)}), 500

    return jsonify({"success": True, "settings": {"log_level": saved}})
