import io
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

import sliceutils
from sliceutils.logger.logger import logger, setup_logger


def test_default_logger():
    assert logger.name == "sliceutils"
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_setup_logger_configures_handler():
    test_logger = setup_logger("sliceutils.test.configure", level="DEBUG")
    assert test_logger.level == logging.DEBUG
    assert len(test_logger.handlers) == 1
    handler = test_logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stdout
    assert handler.formatter.datefmt == "%Y-%m-%d %H:%M:%S"


def test_setup_logger_is_idempotent():
    first = setup_logger("sliceutils.test.idempotent", level="INFO")
    second = setup_logger("sliceutils.test.idempotent", level="ERROR")
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.INFO


def test_setup_logger_uses_environment(monkeypatch):
    monkeypatch.setenv("SLICEUTILS_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("SLICEUTILS_LOG_FORMAT", "%(levelname)s %(message)s")
    test_logger = setup_logger("sliceutils.test.environment")
    assert test_logger.level == logging.WARNING
    assert test_logger.handlers[0].formatter._fmt == "%(levelname)s %(message)s"


def test_setup_logger_custom_stream():
    stream = io.StringIO()
    test_logger = setup_logger(
        "sliceutils.test.stream", level="info", format_string="%(message)s", stream=stream
    )
    test_logger.info("hello")
    assert stream.getvalue() == "hello\n"


def test_setup_logger_rejects_unknown_level():
    with pytest.raises(ValueError, match="LOG_LEVEL must be one of"):
        setup_logger("sliceutils.test.badlevel", level="LOUD")


def test_setup_logger_falls_back_on_invalid_environment(monkeypatch):
    monkeypatch.setenv("SLICEUTILS_LOG_LEVEL", "trace")
    stream = io.StringIO()
    test_logger = setup_logger(
        "sliceutils.test.invalid_env", format_string="%(levelname)s %(message)s", stream=stream
    )
    assert test_logger.level == logging.INFO
    assert stream.getvalue().startswith("WARNING Ignoring invalid logging settings")


@pytest.mark.parametrize("value", ["warn", "WARN", "10", "trace"])
def test_import_with_generic_log_level(value):
    env = dict(os.environ, LOG_LEVEL=value)
    env.pop("SLICEUTILS_LOG_LEVEL", None)
    package_root = str(Path(sliceutils.__file__).resolve().parents[1])
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [package_root, env.get("PYTHONPATH")]))
    completed = subprocess.run(
        [sys.executable, "-c", "import sliceutils"],
        env=env,
        capture_output=True,
        text=True,
    )
    assert completed.returncode == 0, completed.stderr
