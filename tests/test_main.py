"""Test the command-line entrypoint."""
from pathlib import Path

import pytest

from calculator_service.common.logger import COMBINED_LOG, logger
from calculator_service.main import main, parse_args
from calculator_service.server.server import CalculatorServer


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    """Run each test without configuration variables from the outer environment."""
    for var in ("HOST", "PORT", "LOG_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


def test_parse_args_defaults() -> None:
    config = parse_args([])
    assert config.port == 3000
    assert config.log_level == "INFO"


def test_parse_args_port_from_env(monkeypatch) -> None:
    """PORT selects the listening port when --port is absent."""
    monkeypatch.setenv("PORT", "4000")
    assert parse_args([]).port == 4000
    assert parse_args(["--port", "4001"]).port == 4001


def test_parse_args_all_options(tmp_path: Path) -> None:
    config = parse_args([
        "--host", "127.0.0.1",
        "--port", "8080",
        "--log-dir", str(tmp_path),
        "--log-level", "debug",
    ])
    assert str(config.host) == "127.0.0.1"
    assert config.port == 8080
    assert config.log_dir == tmp_path
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("argv", [
    ["--port", "70000"],
    ["--port", "abc"],
    ["--log-level", "verbose"],
])
def test_parse_args_invalid(argv: list) -> None:
    """Invalid arguments exit through argparse."""
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_main_opens_and_closes_logging(tmp_path: Path, monkeypatch) -> None:
    """main logs to the configured directory and closes the sinks on exit."""
    started = []
    monkeypatch.setattr(CalculatorServer, "start", lambda self: started.append(self.config.port))

    main(["--port", "8082", "--log-dir", str(tmp_path)])

    assert started == [8082]
    assert logger.handlers == []
    assert "Server stopped" in (tmp_path / COMBINED_LOG).read_text(encoding="utf-8")


def test_main_closes_logging_on_failure(tmp_path: Path, monkeypatch) -> None:
    """Log sinks are closed even when the server fails."""
    def fail(self):
        raise OSError("address already in use")

    monkeypatch.setattr(CalculatorServer, "start", fail)

    with pytest.raises(OSError):
        main(["--log-dir", str(tmp_path)])

    assert logger.handlers == []
