from dataclasses import dataclass
from typing import Callable, Optional

NOT_ACTIVE = "Plugin is not active."
NO_METRICS = "No metrics available."
METRICS_FAILED = "Metrics unavailable."
SEPARATOR = " | "


class MetricsUnavailable(Exception):
    """Raised by a provider when its data can't be read (e.g. post type not registered)."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


@dataclass
class PluginInfo:
    name: str
    version: str = ""
    active: bool = True
    provider: Optional[Callable] = None


def format_metrics(items) -> str:
    parts = []
    for item in items or []:
        if isinstance(item, (tuple, list)) and len(item) == 2:
            count, label = item
            parts.append(f"{count} {label}")
        else:
            parts.append(str(item))
    return SEPARATOR.join(parts) if parts else NO_METRICS


class PluginRegistry:
    """
    plugin name -> metrics provider.

    A provider is a zero-arg callable returning [(count, label), ...] or plain
    strings. Providers that blow up are logged to the suite log under the
    plugin's own name.
    """

    def __init__(self, suite_logger=None):
        self.suite_logger = suite_logger
        self._plugins: dict[str, PluginInfo] = {}

    def register(self, name: str, version: str = "", provider=None, active: bool = True) -> PluginInfo:
        info = PluginInfo(name=name, version=version, active=active, provider=provider)
        self._plugins[name] = info
        return info

    def unregister(self, name: str):
        self._plugins.pop(name, None)

    def get(self, name: str) -> PluginInfo | None:
        return self._plugins.get(name)

    def __contains__(self, name):
        return name in self._plugins

    def __len__(self):
        return len(self._plugins)

    def describe(self, name: str) -> str:
        info = self._plugins.get(name)
        if info is None:
            return NO_METRICS
        if not info.active:
            return NOT_ACTIVE
        if info.provider is None:
            return NO_METRICS

        try:
            return format_metrics(info.provider())
        except MetricsUnavailable as e:
            return e.reason
        except Exception as e:
            if self.suite_logger is not None:
                self.suite_logger.log(name, f"metrics provider failed: {e}", "ERROR")
            return METRICS_FAILED

    def status(self):
        out = []
        for name in sorted(self._plugins):
            info = self._plugins[name]
            out.append({
                "name": info.name,
                "version": info.version,
                "active": info.active,
                "metrics": self.describe(name),
            })
        return out
