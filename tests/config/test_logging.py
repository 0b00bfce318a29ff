"""Tests for the shared loguru/structlog output selection."""

import io
import sys

import pytest
import structlog
from structlog.processors import JSONRenderer

from stamp_system.config.logging import use_console_output
from stamp_system.config.settings import settings
from stamp_system.utils.logging import configure_structured_logging


class _Terminal(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.fixture
def restore_structlog(monkeypatch: pytest.MonkeyPatch):
    yield
    monkeypatch.undo()
    configure_structured_logging()


class TestOutputSelection:
    def test_json_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stderr", _Terminal())

        assert settings.log_format == "json"
        assert use_console_output() is False

    def test_console_on_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stderr", _Terminal())
        monkeypatch.setattr(settings, "log_format", "console")

        assert use_console_output() is True

    def test_console_format_ignored_off_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stderr", io.StringIO())
        monkeypatch.setattr(settings, "log_format", "console")

        assert use_console_output() is False


class TestStructlogRenderer:
    def test_follows_settings(
        self, monkeypatch: pytest.MonkeyPatch, restore_structlog
    ) -> None:
        monkeypatch.setattr(sys, "stderr", _Terminal())
        monkeypatch.setattr(settings, "log_format", "console")
        configure_structured_logging()
        assert isinstance(
            structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer
        )

        monkeypatch.setattr(settings, "log_format", "json")
        configure_structured_logging()
        assert isinstance(structlog.get_config()["processors"][-1], JSONRenderer)
