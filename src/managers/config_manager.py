"""
Config Manager

Loads config.yaml into a PwmConfig, falling back to factory defaults.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from models.config import PwmConfig
from utils.enum_helper import EnumHelper
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)


class ConfigManager:
    """
    Main configuration manager

    Loads config.yaml and parses it into a PwmConfig. Any failure (missing
    file, YAML error, invalid value) falls back to factory_defaults.yaml.

    Example:
        config = ConfigManager().load()
        config.fade_step   # 2
        config.pins        # {LedChannel.MANUAL: 17, ...}
    """

    def __init__(
        self,
        config_path="config/config.yaml",
        defaults_path="config/factory_defaults.yaml",
        base_dir: Optional[Path] = None,
    ):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main config.yaml (relative to base_dir)
            defaults_path: Path to factory defaults fallback
            base_dir: Directory paths are resolved against (default: src/)
        """
        self.base_dir = Path(base_dir) if base_dir else Path(__file__).resolve().parent.parent
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}
        self.config: Optional[PwmConfig] = None
        self.used_defaults = False

    def load(self) -> PwmConfig:
        """
        Load YAML configuration

        Process:
        1. Load main config.yaml and build PwmConfig
        2. On failure log the error and load factory_defaults.yaml instead

        Returns:
            Parsed PwmConfig

        Raises:
            Exception: If factory defaults cannot be loaded either
        """
        try:
            self.data = self._read_yaml(self.config_path)
            self.config = PwmConfig.from_dict(self.data)
            self.used_defaults = False

        except Exception as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            self.data = self._read_yaml(self.factory_defaults_path)
            self.config = PwmConfig.from_dict(self.data)
            self.used_defaults = True

        log.info(
            "Configuration loaded",
            backend=EnumHelper.to_name(self.config.backend),
            pins=", ".join(f"{ch.name}={pin}" for ch, pin in self.config.pins.items()),
            step=self.config.fade_step,
            period=f"{self.config.period_ms} ms",
        )
        return self.config

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        full_path = self.base_dir / path
        with open(full_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a mapping, got {type(data).__name__}")
        return data
