from flask import Flask
from .config import Config
from .extensions import db
from .services.plugin_registry import PluginRegistry
from .services.settings_service import SettingsService
from .services.suite_logger import SuiteLogger


def create_app(config=None):
    """
    Suite components get the logger and the plugin registry from
    app.extensions["suite_logger"] and app.extensions["plugin_registry"].
    Each component registers its own metrics provider after the app is
    built, e.g. registry.register("TW Plays", "2.0", plays_metrics);
    until then /api/status lists no plugins.
    """
    app = Flask(__name__)
    app.config.from_object(Config)

    if config is not None:
        if isinstance(config, dict):
            app.config.update(config)
        else:
            app.config.from_object(config)

    app.config["SECRET_KEY"] = app.config.get("SECRET_KEY") or "dev-secret-key"

    db.init_app(app)

    # one logger + registry per app, handed to whoever needs them
    suite_logger = SuiteLogger()
    app.extensions["suite_logger"] = suite_logger
    app.extensions["plugin_registry"] = PluginRegistry(suite_logger)

    # Blueprints
    from .controllers.auth_controller import auth_bp
    from .controllers.dashboard_controller import dashboard_bp
    from .controllers.logs_controller import logs_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(logs_bp)

    with app.app_context():
        db.create_all()
        SettingsService().ensure_defaults()

    return app
