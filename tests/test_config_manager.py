"""
Tests for ConfigManager and PwmConfig parsing.
"""

from pathlib import Path

import pytest

from managers.config_manager import ConfigManager
from models.config import PwmConfig
from models.enums import LedChannel, LogLevel, PwmBackend


DEFAULTS_YAML = """
pwm:
  backend: mock
pins:
  manual: 17
  fade_primary: 27
  fade_secondary: 22
fade:
  step: 2
  period_ms: 20
"""


def write_configs(tmp_path: Path, config_text: str, defaults_text: str = DEFAULTS_YAML) -> ConfigManager:
    (tmp_path / "config.yaml").write_text(config_text, encoding="utf-8")
    (tmp_path / "factory_defaults.yaml").write_text(defaults_text, encoding="utf-8")
    return ConfigManager("config.yaml", "factory_defaults.yaml", base_dir=tmp_path)


class TestPwmConfig:
    """Dataclass defaults and validation."""

    def test_defaults_match_board_wiring(self):
        config = PwmConfig()

        assert config.pins == {
            LedChannel.MANUAL: 17,
            LedChannel.FADE_PRIMARY: 27,
            LedChannel.FADE_SECONDARY: 22,
        }
        assert config.fade_step == 2
        assert config.period_ms == 20
        assert config.backend == PwmBackend.AUTO

    def test_from_empty_dict_uses_defaults(self):
        assert PwmConfig.from_dict({}) == PwmConfig()

    def test_from_dict_parses_enums_case_insensitive(self):
        config = PwmConfig.from_dict({
            "pwm": {"backend": "RPi_GPIO"},
            "logging": {"level": "debug", "colors": False},
        })

        assert config.backend == PwmBackend.RPI_GPIO
        assert config.log_level == LogLevel.DEBUG
        assert config.log_colors is False

    @pytest.mark.parametrize("kwargs", [
        {"manual_pin": 27},
        {"fade_step": 0},
        {"period_ms": -5},
        {"frequency_hz": 0},
        {"fade_secondary_pin": -1},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            PwmConfig(**kwargs)

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValueError, match="pigpio"):
            PwmConfig.from_dict({"pwm": {"backend": "arduino"}})


class TestConfigManager:
    """YAML loading with factory defaults fallback."""

    def test_load_main_config(self, tmp_path):
        manager = write_configs(tmp_path, """
pwm:
  backend: mock
  frequency_hz: 1000
fade:
  step: 5
  period_ms: 40
""")

        config = manager.load()

        assert config.backend == PwmBackend.MOCK
        assert config.frequency_hz == 1000
        assert config.fade_step == 5
        assert config.period_ms == 40
        assert manager.used_defaults is False

    def test_missing_config_falls_back_to_defaults(self, tmp_path):
        (tmp_path / "factory_defaults.yaml").write_text(DEFAULTS_YAML, encoding="utf-8")
        manager = ConfigManager("missing.yaml", "factory_defaults.yaml", base_dir=tmp_path)

        config = manager.load()

        assert config.backend == PwmBackend.MOCK
        assert manager.used_defaults is True

    def test_invalid_config_falls_back_to_defaults(self, tmp_path):
        manager = write_configs(tmp_path, "fade:\n  step: -3\n")

        config = manager.load()

        assert config.fade_step == 2
        assert manager.used_defaults is True

    def test_non_mapping_yaml_falls_back(self, tmp_path):
        manager = write_configs(tmp_path, "- just\n- a list\n")

        assert manager.load().backend == PwmBackend.MOCK
        assert manager.used_defaults is True

    def test_broken_defaults_raise(self, tmp_path):
        manager = write_configs(tmp_path, "fade: [", defaults_text="pins: {manual: 1, fade_primary: 1}")

        with pytest.raises(ValueError):
            manager.load()

    def test_shipped_config_files_load(self):
        manager = ConfigManager()

        config = manager.load()

        assert manager.used_defaults is False
        assert config == PwmConfig()

    def test_shipped_defaults_match_dataclass(self):
        manager = ConfigManager(config_path="config/factory_defaults.yaml")

        assert manager.load() == PwmConfig()

    def test_shipped_configs_live_in_installable_package(self):
        import config
        import runtime

        package_dir = Path(config.__file__).resolve().parent

        assert (package_dir / "config.yaml").is_file()
        assert (package_dir / "factory_defaults.yaml").is_file()
        assert runtime.RuntimeInfo.has_module("yaml")
        assert package_dir == ConfigManager().base_dir / "config"
