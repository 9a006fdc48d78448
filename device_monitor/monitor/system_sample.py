from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

FIXED_COLUMNS = [
    "timestamp",
    "memory_used_mb",
    "memory_total_mb",
    "cpu_global_usage",
]
CORE_COLUMN_PREFIX = "cpu_core_"


def build_header(core_count: int) -> List[str]:
    """
    Build the header row for a log file.

    Args:
        core_count: Number of logical cores observed when the file is opened

    Returns:
        The four fixed columns followed by one cpu_core_<i> column per core
    """
    return FIXED_COLUMNS + [f"{CORE_COLUMN_PREFIX}{i}" for i in range(core_count)]


@dataclass
class SystemSample:
    """Single point-in-time reading of host memory and CPU usage"""
    timestamp: str
    memory_used_mb: int
    memory_total_mb: int
    cpu_global_usage: float
    cpu_core_usage: List[float] = field(default_factory=list)

    @property
    def core_count(self) -> int:
        return len(self.cpu_core_usage)

    def to_row(self, core_columns: Optional[int] = None) -> List[Union[str, int, float]]:
        """
        Flatten the sample into a positional row matching build_header().

        Args:
            core_columns: Width of the per-core part of the header this row is
                written under. Extra core values are dropped and missing ones
                are left empty. None keeps every reported core.

        Returns:
            [timestamp, used, total, global, core_0, ..., core_{N-1}]
        """
        cores: List[Union[str, float]] = list(self.cpu_core_usage)
        if core_columns is not None:
            cores = cores[:core_columns] + [""] * (core_columns - len(cores))

        return [
            self.timestamp,
            self.memory_used_mb,
            self.memory_total_mb,
            self.cpu_global_usage,
            *cores,
        ]

    def to_dict(self) -> Dict:
        """Named view of the sample, used for debug output"""
        return {
            'timestamp': self.timestamp,
            'memory_used_mb': self.memory_used_mb,
            'memory_total_mb': self.memory_total_mb,
            'cpu_global_usage': self.cpu_global_usage,
            'cpu_core_usage': list(self.cpu_core_usage),
        }
