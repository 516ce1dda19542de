import logging

import pytest

from spinbox.cli import build_parser, config_from_args, main, run_headless


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("spinbox")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_parser_defaults_build_valid_config():
    args = build_parser().parse_args([])
    config = config_from_args(args).validate()
    assert config.rotation_mode == "euler"
    assert not args.headless


def test_headless_run_logs_summary(caplog):
    caplog.set_level(logging.INFO, logger="spinbox")
    status = main(["--headless", "--ticks", "300", "--velocity", "1.5", "0.5", "0.2"])
    assert status == 0
    assert any("300 ticks" in r.getMessage() for r in caplog.records)


def test_headless_debug_logs_contacts(caplog):
    caplog.set_level(logging.DEBUG, logger="spinbox")
    status = main([
        "--headless", "--debug", "--ticks", "1",
        "--angular-velocity", "0", "0", "0",
        "--position", "24.5", "0", "0",
        "--velocity", "1", "0", "0",
    ])
    assert status == 0
    assert any("+x" in r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG)


def test_invalid_config_exit_status(caplog):
    status = main(["--headless", "--half-extent", "1", "--radius", "2"])
    assert status == 2
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_run_headless_returns_simulation():
    args = build_parser().parse_args(["--rotation-mode", "quaternion"])
    sim = run_headless(config_from_args(args).validate(), 50)
    assert sim.ticks == 50


def test_log_file(tmp_path):
    log_file = tmp_path / "run.log"
    assert main(["--headless", "--ticks", "10", "--log-file", str(log_file)]) == 0
    assert "10 ticks" in log_file.read_text(encoding="utf-8")
