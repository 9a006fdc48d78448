"""
Metrics Reader Module

Queries the operating system (through psutil) for host memory usage and for
global and per-core CPU utilization.
"""
from datetime import datetime
from typing import Callable, List, Tuple

import psutil

from device_monitor.monitor.system_sample import SystemSample
from device_monitor.util.log_config import setup_logger

logger = setup_logger(__name__)

BYTES_PER_MB = 1024 * 1024
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Failures psutil can surface while reading system-wide counters
READ_ERRORS = (psutil.Error, OSError)


class MetricsReader:
    """Read host CPU and memory utilization"""

    def __init__(self, now: Callable[[], datetime] = datetime.now):
        """
        Initialize the reader and prime the CPU usage baselines.

        psutil reports CPU usage as the delta since the previous call, so the
        first call only establishes the baseline (and returns 0.0).

        Args:
            now: Source of local wall-clock time for sample timestamps
        """
        self.now = now
        self._read_global_cpu()
        self._read_core_cpu()

    def sample(self) -> SystemSample:
        """
        Take one reading.

        The caller is responsible for letting at least one sampling interval
        elapse between calls so the CPU percentages cover a nonzero window.

        Returns:
            SystemSample for the current moment
        """
        timestamp = self.now().strftime(TIMESTAMP_FORMAT)
        memory_used_mb, memory_total_mb = self._read_memory()

        return SystemSample(
            timestamp=timestamp,
            memory_used_mb=memory_used_mb,
            memory_total_mb=memory_total_mb,
            cpu_global_usage=self._read_global_cpu(),
            cpu_core_usage=self._read_core_cpu(),
        )

    def core_count(self) -> int:
        """
        Number of logical cores, queried fresh on every call.

        Uses cpu_count() so the per-core usage baseline is left untouched.
        """
        try:
            count = psutil.cpu_count(logical=True)
        except READ_ERRORS as e:
            logger.warning(f"Failed to read core count: {e}")
            return 0
        return count or 0

    def _read_memory(self) -> Tuple[int, int]:
        try:
            mem = psutil.virtual_memory()
        except READ_ERRORS as e:
            logger.warning(f"Failed to read memory usage: {e}")
            return 0, 0

        # used = total - available keeps used <= total on every platform
        used = max(mem.total - mem.available, 0)
        return used // BYTES_PER_MB, mem.total // BYTES_PER_MB

    def _read_global_cpu(self) -> float:
        try:
            return float(psutil.cpu_percent(interval=None))
        except READ_ERRORS as e:
            logger.warning(f"Failed to read global CPU usage: {e}")
            return 0.0

    def _read_core_cpu(self) -> List[float]:
        try:
            return [float(usage) for usage in psutil.cpu_percent(interval=None, percpu=True)]
        except READ_ERRORS as e:
            logger.warning(f"Failed to read per-core CPU usage: {e}")
            return []
