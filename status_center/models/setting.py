from datetime import datetime
from ..extensions import db


class Setting(db.Model):
    """Single key/value option row (e.g. name="log_level", value="info")."""

    __tablename__ = "suite_settings"

    name = db.Column(db.String(64), primary_key=True)
    value = db.Column(db.String(255), nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
