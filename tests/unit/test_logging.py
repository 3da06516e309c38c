"""Tests for structured logging setup."""

import json
import logging

import pytest
import structlog

from stockledger.config import Settings, configure_logging, get_logger
from stockledger.config.logging import STORAGE_LOGGER


@pytest.fixture(autouse=True)
def _restore_levels():
    names = ["", "stockledger", STORAGE_LOGGER]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def _context_processor():
    return next(
        p
        for p in structlog.get_config()["processors"]
        if getattr(p, "__name__", "") == "add_app_context"
    )


class TestConfigureLogging:
    def test_development_uses_console_renderer(self):
        configure_logging(Settings(environment="development"))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_production_uses_json_renderer(self):
        configure_logging(Settings(environment="production"))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_explicit_settings_feed_app_context(self):
        settings = Settings(app_name="Warehouse North", environment="staging")
        configure_logging(settings)
        event = _context_processor()(None, "info", {"event": "movement_recorded"})
        assert event["app"] == "Warehouse North"
        assert event["environment"] == "staging"
        assert event["version"] == settings.app_version

    def test_event_fields_win_over_app_context(self):
        configure_logging(Settings(app_name="Stock Ledger"))
        event = _context_processor()(None, "info", {"event": "x", "app": "importer"})
        assert event["app"] == "importer"

    def test_levels_from_settings(self):
        configure_logging(Settings(log_level="ERROR", storage_log_level="DEBUG"))
        assert logging.getLogger("stockledger").level == logging.ERROR
        assert logging.getLogger(STORAGE_LOGGER).level == logging.DEBUG

    def test_defaults_to_global_settings(self, monkeypatch):
        monkeypatch.setenv("APP_NAME", "From Env")
        configure_logging()
        event = _context_processor()(None, "info", {"event": "x"})
        assert event["app"] == "From Env"

    def test_json_output(self, caplog):
        configure_logging(Settings(environment="production", log_level="INFO"))
        with caplog.at_level(logging.INFO):
            get_logger("stockledger.test").info("movement_recorded", product_id=1, qty=2)
        payload = json.loads(caplog.records[-1].getMessage())
        assert payload["event"] == "movement_recorded"
        assert payload["qty"] == 2
        assert payload["app"] == "Stock Ledger"
