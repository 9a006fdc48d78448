"""Sample host CPU and memory usage into time-rotated CSV log files."""

from .monitor.metrics_reader import MetricsReader
from .monitor.rotating_logger import RotatingLogger
from .monitor.system_sample import SystemSample, build_header

__version__ = "0.1.0"

__all__ = ["MetricsReader", "RotatingLogger", "SystemSample", "build_header"]
