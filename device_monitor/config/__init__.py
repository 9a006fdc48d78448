"""Configuration module for the device monitor."""

from .monitor_config import MonitorConfig
from .config_loader import ConfigLoader, DEFAULT_CONFIG_PATH

__all__ = ["MonitorConfig", "ConfigLoader", "DEFAULT_CONFIG_PATH"]
