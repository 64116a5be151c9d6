from unittest.mock import MagicMock

from status_center.services.plugin_registry import (
    METRICS_FAILED,
    NO_METRICS,
    NOT_ACTIVE,
    MetricsUnavailable,
    PluginRegistry,
    format_metrics,
)


def plays_metrics():
    return [(12, "Plays"), (40, "Actors"), (9, "Crew")]


class TestFormatMetrics:
    def test_pairs_joined(self):
        assert format_metrics(plays_metrics()) == "12 Plays | 40 Actors | 9 Crew"

    def test_plain_strings(self):
        assert format_metrics(["7 Scripts Found (3 PHP, 2 JS, 2 CSS)"]) == "7 Scripts Found (3 PHP, 2 JS, 2 CSS)"

    def test_empty(self):
        assert format_metrics([]) == NO_METRICS
        assert format_metrics(None) == NO_METRICS


class TestPluginRegistry:
    def test_active_plugin_with_provider(self):
        reg = PluginRegistry()
        reg.register("TW Plays", "2.0.1", plays_metrics)
        assert reg.describe("TW Plays") == "12 Plays | 40 Actors | 9 Crew"

    def test_inactive_plugin(self):
        reg = PluginRegistry()
        reg.register("TW Calendar", "1.0", lambda: [(3, "Events")], active=False)
        assert reg.describe("TW Calendar") == NOT_ACTIVE

    def test_no_provider(self):
        reg = PluginRegistry()
        reg.register("TW Misc", "0.1")
        assert reg.describe("TW Misc") == NO_METRICS
        assert reg.describe("never registered") == NO_METRICS

    def test_provider_reports_unavailable(self):
        def forms():
            raise MetricsUnavailable("Form CPT not registered.")

        reg = PluginRegistry()
        reg.register("TW Forms", "1.2", forms)
        assert reg.describe("TW Forms") == "Form CPT not registered."

    def test_provider_crash_is_logged_to_suite_log(self):
        suite_logger = MagicMock()

        def broken():
            raise ZeroDivisionError("division by zero")

        reg = PluginRegistry(suite_logger)
        reg.register("TW Scripts", "1.0", broken)

        assert reg.describe("TW Scripts") == METRICS_FAILED
        suite_logger.log.assert_called_once()
        source, message, level = suite_logger.log.call_args.args
        assert source == "TW Scripts"
        assert "division by zero" in message
        assert level == "ERROR"

    def test_status_sorted_by_name(self):
        reg = PluginRegistry()
        reg.register("TW Plays", "2.0", plays_metrics)
        reg.register("TW Calendar", "1.0", active=False)
        rows = reg.status()
        assert [r["name"] for r in rows] == ["TW Calendar", "TW Plays"]
        assert rows[0] == {"name": "TW Calendar", "version": "1.0", "active": False, "metrics": NOT_ACTIVE}

    def test_register_replaces_and_unregister(self):
        reg = PluginRegistry()
        reg.register("TW Plays", "1.0")
        reg.register("TW Plays", "2.0")
        assert len(reg) == 1
        assert reg.get("TW Plays").version == "2.0"
        reg.unregister("TW Plays")
        assert "TW Plays" not in reg
