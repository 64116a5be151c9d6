from datetime import datetime
from ..extensions import db


class LogEvent(db.Model):
    __tablename__ = "suite_logs"
    # ids are never reused, even after a clear
    __table_args__ = {"sqlite_autoincrement": True}

    # sqlite only auto-increments INTEGER PRIMARY KEY
    id = db.Column(
        db.BigInteger().with_variant(db.Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    log_time = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    source = db.Column(db.String(100), nullable=False, index=True)   # TW Forms, TW Plays...
    level = db.Column(db.String(20), nullable=False)                 # DEBUG/INFO/WARNING/ERROR
    message = db.Column(db.Text, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "timestamp": self.log_time.strftime("%Y-%m-%d %H:%M:%S") if self.log_time else None,
            "source": self.source,
            "level": (self.level or "").upper(),
            "message": self.message,
        }

    def __repr__(self):
        return f"<LogEvent {self.id} {self.level} {self.source!r}>"
