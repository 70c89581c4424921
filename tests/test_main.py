"""
Tests for the application entry point (startup, run, shutdown).

The PWM sink and stdin reader are replaced so main() runs without hardware
or a terminal.
"""

import asyncio

import pytest

import main_asyncio
from hardware.pwm.pwm_sink_mock import MockPwmSink
from managers.config_manager import ConfigManager
from models.enums import LedChannel


CONFIG_YAML = """
pwm:
  backend: mock
fade:
  step: 2
  period_ms: 1
logging:
  level: error
  colors: false
"""


@pytest.fixture
def config_manager(tmp_path):
    (tmp_path / "config.yaml").write_text(CONFIG_YAML, encoding="utf-8")
    (tmp_path / "factory_defaults.yaml").write_text(CONFIG_YAML, encoding="utf-8")
    return ConfigManager("config.yaml", "factory_defaults.yaml", base_dir=tmp_path)


@pytest.fixture
def mock_sink(monkeypatch, pins):
    sink = MockPwmSink(pins)
    monkeypatch.setattr(main_asyncio, "create_pwm_sink", lambda config: sink)
    return sink


class ScriptedInput:
    """Stands in for StdinLevelInput: sets one level, then quits."""

    def __init__(self, manual_channel, on_quit=None):
        self.manual_channel = manual_channel
        self.on_quit = on_quit

    async def run(self):
        await asyncio.sleep(0.02)
        self.manual_channel.set_level(128)
        self.on_quit()
        await asyncio.sleep(10)


class TestStartup:

    @pytest.mark.asyncio
    async def test_initialization_failure_exits_with_status_1(self, config_manager, mock_sink):
        mock_sink.fail_on_initialize = True

        status = await main_asyncio.main(config_manager, install_signal_handlers=False)

        assert status == 1
        assert mock_sink.history == []
        assert mock_sink.released

    def test_start_sink_returns_none_on_failure(self, mock_sink):
        mock_sink.fail_on_initialize = True
        mock_sink.fail_on_cleanup = True

        assert main_asyncio.start_sink(None) is None


class TestRunAndShutdown:

    @pytest.mark.asyncio
    async def test_quit_runs_full_shutdown(self, config_manager, mock_sink, monkeypatch):
        monkeypatch.setattr(main_asyncio, "StdinLevelInput", ScriptedInput)

        status = await asyncio.wait_for(
            main_asyncio.main(config_manager, install_signal_handlers=False),
            timeout=5.0
        )

        assert status == 0
        assert 128 in mock_sink.writes_for(LedChannel.MANUAL)
        assert len(mock_sink.writes_for(LedChannel.FADE_PRIMARY)) > 1
        assert mock_sink.values == {channel: 0 for channel in mock_sink.channels}
        assert mock_sink.released
