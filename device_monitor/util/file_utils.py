from datetime import datetime
from pathlib import Path
from typing import Union

LOG_FILE_PREFIX = "device_metrics_"
LOG_FILE_SUFFIX = ".csv"
# Colon-free so the name is valid on every filesystem
LOG_FILE_TIME_FORMAT = "%Y-%m-%d_%H-%M-%S"


def ensure_log_dir(path: Union[str, Path]) -> Path:
    """
    Create the log directory (and any missing parents) if it does not exist.

    Args:
        path: The directory that will hold the metric log files

    Returns:
        The directory as a Path

    Raises:
        NotADirectoryError: If the path exists but is not a directory
        OSError: If the directory cannot be created
    """
    path_obj = Path(path)

    if path_obj.exists() and not path_obj.is_dir():
        raise NotADirectoryError(f"Log path is not a directory: {path}")

    path_obj.mkdir(parents=True, exist_ok=True)
    return path_obj


def log_file_name(moment: datetime) -> str:
    return f"{LOG_FILE_PREFIX}{moment.strftime(LOG_FILE_TIME_FORMAT)}{LOG_FILE_SUFFIX}"


def log_file_path(log_dir: Union[str, Path], moment: datetime) -> Path:
    return Path(log_dir) / log_file_name(moment)
