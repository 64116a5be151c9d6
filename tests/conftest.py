import pytest

from status_center import create_app
from status_center.extensions import db


class TestingConfig:
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    ADMIN_USERNAME = "admin"
    ADMIN_PASSWORD = "s3cret"


@pytest.fixture
def app():
    """Flask app on an in-memory database, with an app context pushed."""
    application = create_app(TestingConfig)
    with application.app_context():
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    c = app.test_client()
    resp = c.post("/auth/login", json={"username": "admin", "password": "s3cret"})
    assert resp.status_code == 200
    return c


@pytest.fixture
def suite_logger(app):
    return app.extensions["suite_logger"]


@pytest.fixture
def settings(app):
    from status_center.services.settings_service import SettingsService
    return SettingsService()
