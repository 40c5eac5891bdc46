from __future__ import annotations

import logging
from pathlib import Path

import pytest

import service_locator.cli as cli


def test_parse_args_defaults():
    args = cli.parse_args([])
    assert args.recipient == "Karen"
    assert args.message == "Tu reporte está listo."
    assert args.missing == "email"
    assert args.strict is False
    assert args.log_file is None


def test_parse_args_verbose_counts():
    assert cli.parse_args([]).verbose == 0
    assert cli.parse_args(["-v"]).verbose == 1
    assert cli.parse_args(["-vv"]).verbose == 2


@pytest.mark.parametrize(
    ("verbose", "expected_console", "expected_root"),
    [
        (0, "WARNING", "WARNING"),
        (1, "INFO", "WARNING"),
        (2, "DEBUG", "DEBUG"),
        (3, "DEBUG", "DEBUG"),
    ],
)
def test_get_logging_configuration_levels(
    verbose: int, expected_console: str, expected_root: str
):
    cfg = cli.get_logging_configuration(verbose=verbose)

    assert cfg["handlers"]["console"]["level"] == expected_console
    assert cfg["handlers"]["console"]["stream"] == "ext://sys.stderr"
    assert cfg["root"]["level"] == expected_root
    assert cfg["root"]["handlers"] == ["console"]
    assert cfg["loggers"]["service_locator"]["level"] == expected_console
    assert "file" not in cfg["handlers"]


def test_get_logging_configuration_with_file(tmp_path: Path):
    log_file = tmp_path / "demo.log"
    cfg = cli.get_logging_configuration(verbose=0, log_file=log_file)

    assert cfg["handlers"]["file"]["filename"] == str(log_file)
    assert cfg["handlers"]["file"]["level"] == "NOTSET"
    assert cfg["loggers"]["service_locator"]["handlers"] == ["console", "file"]
    assert cfg["loggers"]["service_locator"]["level"] == "DEBUG"


@pytest.fixture
def captured_config(monkeypatch: pytest.MonkeyPatch):
    captured = {"cfg": None}

    def fake_dict_config(cfg):
        captured["cfg"] = cfg

    monkeypatch.setattr(cli.logging.config, "dictConfig", fake_dict_config)
    return captured


def test_main_runs_demo(captured_config, capsys):
    assert cli.main(["--recipient", "Ana", "--message", "Hola"]) == 0

    out = capsys.readouterr().out
    assert "Notification for Ana: Hola" in out
    assert "ventas: 200" in out
    assert "Error: Service not registered: 'email'" in out
    assert captured_config["cfg"] is not None


def test_main_strict_fails_when_missing_service_exists(captured_config, capsys):
    assert cli.main(["--missing", "report", "--strict"]) == 1


def test_main_non_strict_ignores_registered_missing_service(captured_config, capsys):
    assert cli.main(["--missing", "report"]) == 0


def test_main_dash_disables_file_logging(captured_config, capsys):
    cli.main(["--log-file", "-"])
    assert "file" not in captured_config["cfg"]["handlers"]


@pytest.fixture
def restore_logging():
    """Undo the handlers and levels a real dictConfig call installs."""
    names = ["", "service_locator"]
    saved = {}
    for name in names:
        lg = logging.getLogger(name)
        saved[name] = (lg.level, list(lg.handlers), lg.propagate)
    yield
    for name, (level, handlers, propagate) in saved.items():
        lg = logging.getLogger(name)
        for handler in list(lg.handlers):
            if handler not in handlers:
                handler.close()
            lg.removeHandler(handler)
        for handler in handlers:
            lg.addHandler(handler)
        lg.setLevel(level)
        lg.propagate = propagate


def test_main_writes_log_file(tmp_path: Path, capsys, restore_logging):
    log_file = tmp_path / "demo.log"
    assert cli.main(["--log-file", str(log_file)]) == 0

    for handler in logging.getLogger("service_locator").handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "Lookup failed" in text
    assert "Registered service 'notification'" in text
