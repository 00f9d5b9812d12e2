import importlib
import logging

import pytest

from tenpin import config


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, "WARNING"),
        ("", "WARNING"),
        (" debug ", "DEBUG"),
        ("Info", "INFO"),
        ("loud", "WARNING"),
    ],
)
def test_canon_log_level(raw, expected):
    assert config._canon_log_level(raw) == expected


def test_log_level_read_from_environment(monkeypatch):
    monkeypatch.setenv("TENPIN_LOG_LEVEL", "error")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.LOG_LEVEL == "ERROR"
    finally:
        monkeypatch.delenv("TENPIN_LOG_LEVEL")
        importlib.reload(config)


def test_configure_logging_sets_package_level():
    package_logger = logging.getLogger("tenpin")
    previous = package_logger.level
    try:
        config.configure_logging("debug")
        assert package_logger.level == logging.DEBUG
    finally:
        package_logger.setLevel(previous)
