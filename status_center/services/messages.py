import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TextMessage:
    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class StructuredMessage:
    data: Any

    def render(self) -> str:
        return json.dumps(_plain(self.data), indent=4, ensure_ascii=False, default=str)


def _plain(value):
    if isinstance(value, Mapping):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_plain(v) for v in value]
    if _is_object(value):
        return _plain(vars(value))
    return value


def _is_object(value) -> bool:
    return hasattr(value, "__dict__") and not isinstance(value, type)


def as_message(value):
    """
    Ingestion-boundary coercion:
      str / TextMessage                      -> TextMessage
      mapping, list, tuple, set, plain obj   -> StructuredMessage
      anything else (numbers, None, bool)    -> TextMessage(str(value))
    """
    if isinstance(value, (TextMessage, StructuredMessage)):
        return value
    if isinstance(value, str):
        return TextMessage(value)
    if isinstance(value, (Mapping, list, tuple, set, frozenset)) or _is_object(value):
        return StructuredMessage(value)
    if value is None:
        return TextMessage("")
    return TextMessage(str(value))
