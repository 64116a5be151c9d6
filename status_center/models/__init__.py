from .log_event import LogEvent
from .setting import Setting

__all__ = ["LogEvent", "Setting"]
