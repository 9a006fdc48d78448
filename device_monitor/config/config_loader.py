"""
Configuration manager for the device monitor.

This module provides the ConfigLoader class for loading and validating
monitor configuration from YAML files.
"""
from pathlib import Path
from typing import Optional

import yaml

from device_monitor.config.monitor_config import MonitorConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config_yaml"

KNOWN_KEYS = ("interval", "rotation_interval", "log_dir")


class ConfigLoader:

    def __init__(self, config_path: Path = DEFAULT_CONFIG_PATH, env: Optional[str] = None):
        self.config_path = Path(config_path)
        self.env = env
        self.config_data = self._load_config()

    def _load_config(self) -> MonitorConfig:
        """
        Load and parse monitor configuration from YAML file.
        Supports environment-specific overrides via config_<env>.yaml

        Returns:
            MonitorConfig: Validated monitor configuration

        Raises:
            FileNotFoundError: If config.yaml (or the env override) is missing
            ValueError: If the files contain unknown keys or invalid values
        """
        data = self._read_yaml(self.config_path / "config.yaml")

        # Load environment-specific override if specified
        if self.env:
            env_data = self._read_yaml(self.config_path / f"config_{self.env}.yaml")
            # dict.update() will overwrite existing keys
            data.update(env_data)

        unknown = sorted(set(data) - set(KNOWN_KEYS))
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

        config = MonitorConfig()
        if "interval" in data:
            config.interval = data["interval"]
        if "rotation_interval" in data:
            config.rotation_interval = data["rotation_interval"]
        if "log_dir" in data:
            config.log_dir = str(data["log_dir"])

        return config.validate()

    @staticmethod
    def _read_yaml(path: Path) -> dict:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        # An empty file loads as None
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {path}")
        return data


if __name__ == "__main__":

    # python3 -m device_monitor.config.config_loader

    config = ConfigLoader(env="dev")
    print(config.config_data)
