from datetime import datetime
from sqlalchemy import delete, desc, func
from ..extensions import db
from ..models.log_event import LogEvent


class LogRepository:
    def _utcnow(self):
        # second resolution is enough for the viewer; id breaks ties
        return datetime.utcnow().replace(microsecond=0)

    def insert_event(self, *, source: str, level: str, message: str) -> LogEvent:
        ev = LogEvent(
            log_time=self._utcnow(),
            source=source,
            level=level,
            message=message,
        )
        db.session.add(ev)
        db.session.commit()
        return ev

    def recent(self, limit: int = 200, source: str | None = None):
        if limit <= 0:
            return []

        query = LogEvent.query
        if source:
            query = query.filter(LogEvent.source == source)

        return (
            query
            .order_by(desc(LogEvent.log_time), desc(LogEvent.id))
            .limit(limit)
            .all()
        )

    def clear(self) -> int:
        # single DELETE inside one transaction: all rows or none
        try:
            result = db.session.execute(delete(LogEvent))
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return result.rowcount or 0

    def count(self) -> int:
        return db.session.query(func.count(LogEvent.id)).scalar() or 0

    def count_by_level(self) -> dict:
        rows = (
            db.session.query(LogEvent.level, func.count(LogEvent.id))
            .group_by(LogEvent.level)
            .all()
        )
        return {(lvl or "").upper(): int(c) for lvl, c in rows}
