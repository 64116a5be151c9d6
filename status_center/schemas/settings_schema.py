from pydantic import BaseModel, Field, field_validator

ALLOWED_LEVELS = ("debug", "info", "warning", "error")
DEFAULT_MINIMUM_LEVEL = "info"


class LogSettingsIn(BaseModel):
    """
    Settings form input. The level is trimmed and lowercased before the
    allow-list check, so "WARNING " saves "warning"; anything else saves "info".
    """

    log_level: str = Field(DEFAULT_MINIMUM_LEVEL, description="minimum severity to persist")

    @field_validator("log_level", mode="before")
    @classmethod
    def _sanitize_level(cls, v):
        # anything outside the allowed set silently becomes the default
        if not isinstance(v, str):
            return DEFAULT_MINIMUM_LEVEL
        s = v.strip().lower()
        return s if s in ALLOWED_LEVELS else DEFAULT_MINIMUM_LEVEL
