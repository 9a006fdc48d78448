from dataclasses import dataclass

DEFAULT_INTERVAL = 1
DEFAULT_ROTATION_INTERVAL = 3600
DEFAULT_LOG_DIR = "logs"


@dataclass
class MonitorConfig:
    interval: int = DEFAULT_INTERVAL
    rotation_interval: int = DEFAULT_ROTATION_INTERVAL
    log_dir: str = DEFAULT_LOG_DIR

    def validate(self) -> "MonitorConfig":
        """
        Check the three monitor parameters.

        Raises:
            ValueError: If an interval is not a whole number of seconds >= 1
                        or the log directory is empty
        """
        for name in ("interval", "rotation_interval"):
            value = getattr(self, name)
            # bool is an int subclass but never a meaningful interval
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer number of seconds, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be at least 1 second, got {value}")

        if not str(self.log_dir).strip():
            raise ValueError("log_dir must not be empty")

        return self

    def __str__(self):
        return (f"MonitorConfig(\n"
                f"  interval={self.interval}s,\n"
                f"  rotation_interval={self.rotation_interval}s,\n"
                f"  log_dir={self.log_dir}\n"
                f")")
