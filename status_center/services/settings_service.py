import logging

from flask import current_app

from ..extensions import db
from ..models.setting import Setting
from ..schemas.settings_schema import LogSettingsIn, DEFAULT_MINIMUM_LEVEL

logger = logging.getLogger(__name__)

LOG_LEVEL_KEY = "log_level"


class SettingsService:
    def _default_level(self) -> str:
        try:
            return current_app.config.get("DEFAULT_LOG_LEVEL") or DEFAULT_MINIMUM_LEVEL
        except RuntimeError:
            # outside an application context
            return DEFAULT_MINIMUM_LEVEL

    def minimum_level(self) -> str:
        row = db.session.get(Setting, LOG_LEVEL_KEY)
        if row is None or not row.value:
            return self._default_level()
        return row.value

    def save_minimum_level(self, raw) -> str:
        level = LogSettingsIn(log_level=raw).log_level

        row = db.session.get(Setting, LOG_LEVEL_KEY)
        if row is None:
            row = Setting(name=LOG_LEVEL_KEY, value=level)
            db.session.add(row)
        else:
            row.value = level
        db.session.commit()

        logger.info("suite log level saved: %s", level)
        return level

    def ensure_defaults(self):
        """Create the log_level row on first start; never overwrites."""
        if db.session.get(Setting, LOG_LEVEL_KEY) is not None:
            return
        db.session.add(Setting(name=LOG_LEVEL_KEY, value=self._default_level()))
        db.session.commit()
