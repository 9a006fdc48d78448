"""Metric sampling and rotating CSV output."""

from .metrics_reader import MetricsReader
from .rotating_logger import RotatingLogger
from .system_sample import SystemSample, build_header

__all__ = ["MetricsReader", "RotatingLogger", "SystemSample", "build_header"]
