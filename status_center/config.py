import os
from urllib.parse import quote_plus
from dotenv import load_dotenv

load_dotenv()


def _database_uri():
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    host = os.getenv("MSSQL_HOST")
    if not host:
        # relative sqlite path -> Flask-SQLAlchemy puts it in the instance folder
        return "sqlite:///status_center.db"

    driver = os.getenv("MSSQL_DRIVER", "ODBC Driver 17 for SQL Server")
    odbc_str = (
        f"DRIVER={{{driver}}};"
        f"SERVER={host};"
        f"DATABASE={os.getenv('MSSQL_DB', 'status_center')};"
        f"UID={os.getenv('MSSQL_USER', 'sa')};"
        f"PWD={os.getenv('MSSQL_PASSWORD', '')};"
        "TrustServerCertificate=yes;"
        "Encrypt=no;"
    )
    return "mssql+pyodbc:///?odbc_connect=" + quote_plus(odbc_str)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # request body limit (20 MB); /api/logs/ ingestion is open
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(20 * 1024 * 1024)))

    # log viewer: hard ceiling on rows per read
    LOG_VIEW_LIMIT = int(os.getenv("LOG_VIEW_LIMIT", "200"))
    LOG_SOURCE_MAX_LENGTH = 100
    LOG_LEVEL_MAX_LENGTH = 20

    DEFAULT_LOG_LEVEL = "info"
    SUITE_LOG_KEEP_UNKNOWN_LEVELS = _env_bool("SUITE_LOG_KEEP_UNKNOWN_LEVELS", "true")

    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin")
