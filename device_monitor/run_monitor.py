#!/usr/bin/env python3
"""
Device monitor entry point.

Loads the configuration, announces it and hands control to the
RotatingLogger, which samples host metrics until the process is interrupted.
"""
import logging
import sys

import yaml
from tabulate import tabulate

from device_monitor.cli.cli import apply_overrides, describe_config, parse_monitor_args
from device_monitor.config.config_loader import ConfigLoader
from device_monitor.monitor.rotating_logger import RotatingLogger
from device_monitor.util.log_config import set_level, setup_logger

# Named explicitly so --verbose reaches it when run as __main__
logger = setup_logger("device_monitor.run_monitor")


def main(argv=None) -> int:
    """
    Main entry point for the device monitor.

    Returns:
        Process exit status: 0 after Ctrl+C, 1 on any fatal failure
    """
    args = parse_monitor_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)

    try:
        config = ConfigLoader(args.config_dir, env=args.env).config_data
        config = apply_overrides(config, args)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("Starting Device Monitor")
    for line in tabulate(describe_config(config, args.env), tablefmt="plain").splitlines():
        logger.info(line)

    monitor = RotatingLogger(
        interval=config.interval,
        log_dir=config.log_dir,
        rotation_interval=config.rotation_interval,
    )

    try:
        monitor.start()
    except KeyboardInterrupt:
        logger.info(f"Monitoring stopped. {monitor.files_created} log file(s) written to {monitor.log_dir}")
        return 0
    except OSError as e:
        logger.error(f"Fatal: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
