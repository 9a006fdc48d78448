#!/usr/bin/env python3
"""
Command-line interface for the device monitor.
"""
import argparse
import sys
from pathlib import Path
from typing import Optional

from device_monitor.config.config_loader import DEFAULT_CONFIG_PATH
from device_monitor.config.monitor_config import MonitorConfig


def build_monitor_parser() -> argparse.ArgumentParser:
    """
    Create the ArgumentParser for the device monitor.

    Every monitor option defaults to None so only flags given on the command
    line override the YAML configuration.
    """
    ap = argparse.ArgumentParser(
        prog="device-monitor",
        description="Sample host CPU and memory usage into rotating CSV log files",
    )
    ap.add_argument("-d", "--log-dir", type=str, default=None,
                    help="Directory to store log files (default: logs)")
    ap.add_argument("-i", "--interval", type=int, default=None,
                    help="Sampling interval in seconds (default: 1)")
    ap.add_argument("-r", "--rotation", type=int, default=None,
                    help="Log rotation interval in seconds (default: 3600)")
    ap.add_argument(
        "--env",
        type=str,
        default=None,
        help=(
            "Environment name for configuration override (e.g., 'dev'). "
            "Loads config_<env>.yaml in addition to the base config.yaml."
        ),
    )
    ap.add_argument("--config-dir", type=Path, default=DEFAULT_CONFIG_PATH,
                    help="Directory containing config.yaml (default: packaged config_yaml/)")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Log every written sample (DEBUG level)")
    return ap


def validate_monitor_args(args: argparse.Namespace):
    if args.interval is not None and args.interval < 1:
        print(f"Error: --interval must be at least 1 second, got {args.interval}", file=sys.stderr)
        sys.exit(1)

    # Rotation below one second would produce colliding file names
    if args.rotation is not None and args.rotation < 1:
        print(f"Error: --rotation must be at least 1 second, got {args.rotation}", file=sys.stderr)
        sys.exit(1)

    if args.log_dir is not None and not args.log_dir.strip():
        print("Error: --log-dir must not be empty", file=sys.stderr)
        sys.exit(1)


def parse_monitor_args(argv=None) -> argparse.Namespace:
    args = build_monitor_parser().parse_args(argv)
    validate_monitor_args(args)
    return args


def apply_overrides(config: MonitorConfig, args: argparse.Namespace) -> MonitorConfig:
    """
    Overlay command-line flags onto a loaded configuration.

    Args:
        config: Configuration loaded from YAML
        args: Parsed command-line arguments

    Returns:
        The same MonitorConfig, updated in place and re-validated
    """
    if args.log_dir is not None:
        config.log_dir = args.log_dir
    if args.interval is not None:
        config.interval = args.interval
    if args.rotation is not None:
        config.rotation_interval = args.rotation
    return config.validate()


def describe_config(config: MonitorConfig, env: Optional[str] = None) -> list:
    """Rows for the startup banner table"""
    rows = [
        ["Log Directory", str(Path(config.log_dir))],
        ["Interval", f"{config.interval}s"],
        ["Rotation", f"{config.rotation_interval}s"],
    ]
    if env:
        rows.append(["Environment", env])
    return rows
