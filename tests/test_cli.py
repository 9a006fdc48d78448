import logging

import pytest

from device_monitor import run_monitor
from device_monitor.cli.cli import apply_overrides, describe_config, parse_monitor_args
from device_monitor.config.monitor_config import MonitorConfig
from device_monitor.util.log_config import set_level


def test_defaults_leave_config_untouched():
    args = parse_monitor_args([])
    config = apply_overrides(MonitorConfig(interval=2, rotation_interval=30, log_dir="x"), args)
    assert (config.interval, config.rotation_interval, config.log_dir) == (2, 30, "x")


def test_short_flags_override_config():
    args = parse_monitor_args(["-d", "out", "-i", "5", "-r", "120"])
    config = apply_overrides(MonitorConfig(), args)
    assert (config.interval, config.rotation_interval, config.log_dir) == (5, 120, "out")


@pytest.mark.parametrize("argv", [["-i", "0"], ["-r", "0"], ["--rotation", "-1"], ["-d", " "]])
def test_invalid_values_exit_with_error(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        parse_monitor_args(argv)
    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_non_integer_interval_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        parse_monitor_args(["-i", "0.5"])
    assert exc.value.code == 2


def test_describe_config_lists_parameters():
    rows = dict(describe_config(MonitorConfig(), env="dev"))
    assert rows["Interval"] == "1s"
    assert rows["Rotation"] == "3600s"
    assert rows["Environment"] == "dev"


class StubLogger:
    outcome = None
    instances = []

    def __init__(self, interval, log_dir, rotation_interval):
        self.interval = interval
        self.log_dir = log_dir
        self.rotation_interval = rotation_interval
        self.files_created = 1
        StubLogger.instances.append(self)

    def start(self):
        raise self.outcome


@pytest.fixture
def stub_logger(monkeypatch):
    StubLogger.instances = []
    monkeypatch.setattr(run_monitor, "RotatingLogger", StubLogger)
    return StubLogger


def test_main_passes_merged_config(stub_logger, tmp_path):
    stub_logger.outcome = KeyboardInterrupt()
    assert run_monitor.main(["--env", "dev", "-d", str(tmp_path)]) == 0

    (instance,) = stub_logger.instances
    assert instance.interval == 1
    assert instance.rotation_interval == 10
    assert instance.log_dir == str(tmp_path)


def test_main_reports_fatal_os_error(stub_logger, monkeypatch):
    errors = []
    monkeypatch.setattr(run_monitor.logger, "error", errors.append)
    stub_logger.outcome = PermissionError("cannot open log file")

    assert run_monitor.main([]) == 1
    assert errors == ["Fatal: cannot open log file"]


def test_main_rejects_bad_config(stub_logger, tmp_path, capsys):
    (tmp_path / "config.yaml").write_text("interval: 0\n", encoding="utf-8")
    assert run_monitor.main(["--config-dir", str(tmp_path)]) == 1
    assert capsys.readouterr().err.startswith("Error:")
    assert stub_logger.instances == []


def test_verbose_reaches_entry_point_logger(stub_logger):
    stub_logger.outcome = KeyboardInterrupt()
    try:
        assert run_monitor.main(["-v"]) == 0
        assert run_monitor.logger.name == "device_monitor.run_monitor"
        assert run_monitor.logger.level == logging.DEBUG
    finally:
        set_level(logging.INFO)
