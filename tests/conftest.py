from datetime import datetime, timedelta

import pytest

from device_monitor.monitor.system_sample import SystemSample


class FakeReader:
    """Stands in for MetricsReader with a fixed core layout"""

    def __init__(self, cores=4, used_mb=2048, total_mb=8192):
        self.cores = cores
        self.used_mb = used_mb
        self.total_mb = total_mb
        self.samples_taken = 0
        self.core_count_calls = 0

    def core_count(self):
        self.core_count_calls += 1
        return self.cores

    def sample(self):
        self.samples_taken += 1
        return SystemSample(
            timestamp=f"2026-10-19T12:00:{self.samples_taken:02d}",
            memory_used_mb=self.used_mb,
            memory_total_mb=self.total_mb,
            cpu_global_usage=12.5,
            cpu_core_usage=[float(i) for i in range(self.cores)],
        )


class FakeClock:
    """
    Monotonic clock driven by the logger's own sleep calls.

    Stops the logger after `max_sleeps` sleeps; the sample taken after the
    last sleep is still written.
    """

    def __init__(self, max_sleeps, start=datetime(2026, 10, 19, 12, 0, 0)):
        self.t = 0.0
        self.max_sleeps = max_sleeps
        self.sleeps = 0
        self.start = start
        self.logger = None

    def clock(self):
        return self.t

    def now(self):
        return self.start + timedelta(seconds=self.t)

    def sleep(self, seconds):
        self.t += seconds
        self.sleeps += 1
        if self.sleeps >= self.max_sleeps:
            self.logger.stop()


@pytest.fixture
def fake_reader():
    return FakeReader()


@pytest.fixture
def make_clock():
    return FakeClock
