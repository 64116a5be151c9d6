from functools import wraps

from flask import Blueprint, current_app, jsonify, request, session

auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


def _credentials():
    """(username, password), stripped; from a JSON object or a submitted form."""
    source = request.get_json(silent=True) if request.is_json else request.form
    if not hasattr(source, "get"):
        source = {}
    return tuple(str(source.get(key) or "").strip() for key in ("username", "password"))


def admin_required(view):
    """Viewer/settings endpoints are for the logged-in admin only."""

    @wraps(view)
    def wrapped(*args, **kwargs):
        user = session.get("user")
        if not user or user.get("role") != "admin":
            return jsonify({"success": False, "error": "authentication required"}), 401
        return view(*args, **kwargs)

    return wrapped


@auth_bp.post("/login")
def login():
    username, password = _credentials()

    if not username or not password:
        return jsonify({"success": False, "error": "username/password required"}), 400

    if (
        username != current_app.config["ADMIN_USERNAME"]
        or password != current_app.config["ADMIN_PASSWORD"]
    ):
        return jsonify({"success": False, "error": "invalid credentials"}), 401

    session["user"] = {"username": username, "role": "admin"}
    return jsonify({"success": True, "user": session["user"]})


@auth_bp.post("/logout")
def logout():
    session.clear()
    return jsonify({"success": True})


@auth_bp.get("/me")
def me():
    user = session.get("user")
    if not user:
        return jsonify({"success": False, "error": "not logged in"}), 401
    return jsonify({"success": True, "user": user})
