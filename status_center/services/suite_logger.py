"""
Suite-wide logging entry point.

One SuiteLogger is built in create_app() and handed to every component that
needs to log. ``record`` is fire-and-forget: a failure to write the log is
reported on the diagnostic logger and never reaches the caller.
``fetch_recent`` and ``clear`` are operator actions and let storage errors
propagate.
"""
import logging
import re
from collections import Counter

from flask import current_app

from ..extensions import db
from ..repositories.log_repository import LogRepository
from . import severity
from .messages import as_message
from .settings_service import SettingsService

logger = logging.getLogger(__name__)

TAG_RE = re.compile(r"<[^>]*>")
WS_RE = re.compile(r"\s+")

DEFAULT_VIEW_LIMIT = 200
DEFAULT_SOURCE_MAX = 100
DEFAULT_LEVEL_MAX = 20

# distinct unknown labels tracked; the rest share one bucket
UNRECOGNIZED_KEYS_MAX = 50
UNRECOGNIZED_OVERFLOW = "<other>"


def _clean_text(value, max_len: int) -> str:
    """Strip markup, collapse whitespace, cut to max_len."""
    s = TAG_RE.sub("", str(value or ""))
    s = WS_RE.sub(" ", s).strip()
    return s[:max_len]


class SuiteLogger:
    def __init__(self, repository: LogRepository | None = None, settings: SettingsService | None = None):
        self.repository = repository or LogRepository()
        self.settings = settings or SettingsService()
        self.unrecognized_levels = Counter()

    def _config(self, key, default):
        try:
            return current_app.config.get(key, default)
        except RuntimeError:
            return default

    @property
    def view_limit(self) -> int:
        return int(self._config("LOG_VIEW_LIMIT", DEFAULT_VIEW_LIMIT))

    def _minimum_level(self) -> str:
        # config is read per call; a missing/unreadable row means the default
        try:
            return self.settings.minimum_level()
        except Exception:
            db.session.rollback()
            logger.warning("suite log settings unreadable, using default minimum level", exc_info=True)
            return self._config("DEFAULT_LOG_LEVEL", "info")

    def _count_unrecognized(self, label: str):
        if label not in self.unrecognized_levels and len(self.unrecognized_levels) >= UNRECOGNIZED_KEYS_MAX:
            label = UNRECOGNIZED_OVERFLOW
        self.unrecognized_levels[label] += 1

    def _level_for_storage(self, level: str) -> str:
        if severity.is_known(level):
            return level

        label = level[: self._config("LOG_LEVEL_MAX_LENGTH", DEFAULT_LEVEL_MAX)]
        self._count_unrecognized(label)
        logger.warning("unrecognized suite log level %r, treated as INFO", label)

        if self._config("SUITE_LOG_KEEP_UNKNOWN_LEVELS", True):
            return label
        return severity.DEFAULT_LEVEL

    def record(self, source, message, level="INFO") -> None:
        try:
            self._record(source, message, level)
        except Exception:
            try:
                db.session.rollback()
            except Exception:
                pass
            logger.exception("suite log write failed source=%r level=%r", source, level)

    def _record(self, source, message, level):
        level = severity.normalize(level)
        stored_level = self._level_for_storage(level)

        if not severity.should_persist(level, self._minimum_level()):
            return

        text = as_message(message).render()
        src = _clean_text(source, self._config("LOG_SOURCE_MAX_LENGTH", DEFAULT_SOURCE_MAX)) or "unknown"

        self.repository.insert_event(source=src, level=stored_level, message=text)

    log = record

    def __call__(self, source, message, level="INFO") -> None:
        self.record(source, message, level)

    def fetch_recent(self, limit: int | None = None, source: str | None = None):
        ceiling = self.view_limit
        if limit is None or limit > ceiling:
            limit = ceiling
        return self.repository.recent(limit=limit, source=source)

    def clear(self) -> int:
        deleted = self.repository.clear()
        logger.info("suite log cleared, %s entries removed", deleted)
        return deleted

    def counts(self) -> dict:
        return self.repository.count_by_level()


def get_suite_logger() -> SuiteLogger:
    return current_app.extensions["suite_logger"]
