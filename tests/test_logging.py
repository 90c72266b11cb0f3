"""
Tests for channel-aware logging configuration.
"""

import pytest
import structlog

from reframer.core.logging import (
    ChannelLogger,
    LogChannel,
    LogLevel,
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_pass_logger,
)


@pytest.fixture(autouse=True)
def restore_silence():
    yield
    clear_request_context()
    configure_logging(level="silent", force=True)


def _renderer():
    return structlog.get_config()["processors"][-1]


class TestConfiguration:

    def test_explicit_arguments(self):
        """Verify level, format and channels passed in are applied."""
        configure_logging(level="verbose", format="json", channels=["rewrite", "store"], force=True)

        assert ChannelLogger(LogChannel.REWRITE)._should_log(LogLevel.VERBOSE)
        assert not ChannelLogger(LogChannel.REWRITE)._should_log(LogLevel.DEBUG)
        assert ChannelLogger(LogChannel.STORE)._should_log(LogLevel.INFO)
        assert not ChannelLogger(LogChannel.PIPELINE)._should_log(LogLevel.INFO)
        assert isinstance(_renderer(), structlog.processors.JSONRenderer)

    def test_environment(self, monkeypatch):
        """Verify env vars fill in missing arguments; unknown channels are ignored."""
        monkeypatch.setenv("REFRAMER_LOG_LEVEL", "debug")
        monkeypatch.setenv("REFRAMER_LOG_CHANNELS", "pipeline, bogus")
        monkeypatch.delenv("REFRAMER_LOG_FORMAT", raising=False)

        configure_logging(force=True)

        assert ChannelLogger(LogChannel.PIPELINE)._should_log(LogLevel.DEBUG)
        assert not ChannelLogger(LogChannel.REWRITE)._should_log(LogLevel.INFO)
        assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)

    def test_not_reconfigured_without_force(self):
        """Verify a second call without force keeps the first configuration."""
        configure_logging(level="info", force=True)
        configure_logging(level="debug")
        assert not ChannelLogger(LogChannel.SYSTEM)._should_log(LogLevel.DEBUG)

    @pytest.mark.parametrize("name", ["loud", "warning", "error"])
    def test_unknown_level_falls_back_to_info(self, name):
        """Verify only silent/info/verbose/debug are recognized."""
        assert LogLevel.from_string(name) == LogLevel.INFO


class TestChannelFiltering:

    def test_channel_and_level_gate(self):
        configure_logging(level="info", channels=["rewrite"], force=True)

        rewrite_log = ChannelLogger(LogChannel.REWRITE)
        store_log = ChannelLogger(LogChannel.STORE)

        assert rewrite_log._should_log(LogLevel.INFO)
        assert not rewrite_log._should_log(LogLevel.VERBOSE)
        assert not store_log._should_log(LogLevel.INFO)

    def test_pass_logger_defaults_to_rewrite(self):
        log = get_pass_logger("p20_phrases")

        assert log.channel == LogChannel.REWRITE
        assert log.name == "reframer.p20_phrases"

    def test_event_includes_request_context(self):
        bind_request_context(request_id="abc")
        event = get_pass_logger("p30_pronouns")._make_event(rules=2)

        assert event == {
            "channel": "REWRITE",
            "rules": 2,
            "pass": "p30_pronouns",
            "request_id": "abc",
        }
