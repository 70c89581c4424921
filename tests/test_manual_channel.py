"""
Tests for ManualChannel and the clamp helper used by its callers.
"""

import pytest

from controllers.manual_channel import ManualChannel
from models.enums import LedChannel
from utils.levels import clamp_level


class TestManualChannel:
    """Pass-through to the manual PWM channel."""

    @pytest.mark.parametrize("value", [0, 1, 128, 255])
    def test_set_level_writes_exact_value(self, sink, value):
        channel = ManualChannel(sink)

        channel.set_level(value)

        assert sink.history == [(LedChannel.MANUAL, value)]
        assert sink.values[LedChannel.MANUAL] == value

    def test_other_channels_untouched(self, sink):
        channel = ManualChannel(sink)

        channel.set_level(200)

        assert sink.values[LedChannel.FADE_PRIMARY] == 0
        assert sink.values[LedChannel.FADE_SECONDARY] == 0

    def test_every_change_is_written(self, sink):
        channel = ManualChannel(sink)

        for value in (10, 20, 30):
            channel.set_level(value)

        assert sink.writes_for(LedChannel.MANUAL) == [10, 20, 30]

    def test_write_failure_is_swallowed(self, sink):
        channel = ManualChannel(sink)
        sink.fail_writes = True

        channel.set_level(100)  # must not raise

        assert sink.history == []

    def test_custom_channel(self, sink):
        channel = ManualChannel(sink, channel=LedChannel.FADE_PRIMARY)

        channel.set_level(42)

        assert sink.history == [(LedChannel.FADE_PRIMARY, 42)]


class TestClampLevel:
    """Clamp helper for level sources."""

    @pytest.mark.parametrize("value, expected", [
        (-10, 0),
        (0, 0),
        (128, 128),
        (255, 255),
        (256, 255),
        (10_000, 255),
    ])
    def test_clamp(self, value, expected):
        assert clamp_level(value) == expected
