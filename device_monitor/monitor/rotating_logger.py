"""
Rotating Logger Module

Owns the sampling loop: sleeps for the sampling interval, takes a reading
from the MetricsReader, appends it as one CSV row and starts a new file once
the rotation interval has elapsed since the current file was opened.
"""
import csv
import time
from datetime import datetime
from pathlib import Path
from typing import IO, Callable, Optional, Union

from device_monitor.monitor.metrics_reader import MetricsReader
from device_monitor.monitor.system_sample import SystemSample, build_header
from device_monitor.util.file_utils import ensure_log_dir, log_file_path
from device_monitor.util.log_config import setup_logger

logger = setup_logger(__name__)


class RotatingLogger:
    """Write host metrics to time-rotated CSV files"""

    def __init__(
        self,
        interval: float,
        log_dir: Union[str, Path],
        rotation_interval: float,
        reader: Optional[MetricsReader] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the rotating logger.

        Args:
            interval: Sampling interval in seconds
            log_dir: Directory that receives the device_metrics_*.csv files
            rotation_interval: Seconds a file stays active before a new one is opened
            reader: Metrics source (default: a MetricsReader on this host)
            sleep: Blocking sleep used between samples
            clock: Monotonic clock used to measure file age
            now: Local wall-clock time used for file names
        """
        self.interval = interval
        self.log_dir = Path(log_dir)
        self.rotation_interval = rotation_interval
        self.reader = reader if reader is not None else MetricsReader()
        self.sleep = sleep
        self.clock = clock
        self.now = now

        self.running = False
        self.current_path: Optional[Path] = None
        self.core_columns = 0
        self.files_created = 0
        self._file: Optional[IO[str]] = None
        self._writer = None
        self._file_opened_at: Optional[float] = None

    def start(self):
        """
        Create the log directory, open the first file and sample until stopped.

        Any OSError (directory creation, file open, write or flush) propagates
        to the caller; nothing is retried. The active file is closed on the
        way out.
        """
        ensure_log_dir(self.log_dir)

        logger.info("Starting monitoring... Press Ctrl+C to stop.")
        logger.info(f"Logs will be saved to: {self.log_dir.resolve()}")

        self.running = True
        try:
            self._open_new_file()

            while self.running:
                if self._rotation_due():
                    self._rotate()

                # Sleep first so the CPU percentages cover a full interval
                self.sleep(self.interval)

                self._write_sample(self.reader.sample())
        finally:
            self.running = False
            self._close_file()

    def stop(self):
        """Stop the loop after the current iteration"""
        self.running = False

    def _rotation_due(self) -> bool:
        return self.clock() - self._file_opened_at >= self.rotation_interval

    def _rotate(self):
        self._close_file()
        self._open_new_file()

    def _open_new_file(self):
        path = log_file_path(self.log_dir, self.now())
        logger.info(f"Creating new log file: {path}")

        self._file = open(path, "a", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        self.current_path = path
        self.files_created += 1

        # Core count is re-queried here; every row in this file uses this width
        self.core_columns = self.reader.core_count()
        self._writer.writerow(build_header(self.core_columns))
        self._file.flush()

        self._file_opened_at = self.clock()

    def _write_sample(self, sample: SystemSample):
        if sample.core_count != self.core_columns:
            logger.warning(
                f"Sample reports {sample.core_count} cores but {self.current_path.name} "
                f"has {self.core_columns} core columns; fitting row to header"
            )

        self._writer.writerow(sample.to_row(core_columns=self.core_columns))
        self._file.flush()
        logger.debug(f"Sample written: {sample.to_dict()}")

    def _close_file(self):
        if self._file is None:
            return
        # Detach first so a failing final flush still leaves no handle behind
        active, self._file, self._writer = self._file, None, None
        try:
            active.flush()
        finally:
            active.close()
