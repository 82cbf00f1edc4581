import logging

import pytest
from pydantic import ValidationError
from prelude.core.config import Settings
from prelude.logger.logger import setup_logger


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("PRELUDE_LOG_LEVEL", "LOG_LEVEL", "PRELUDE_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.load()
    assert settings.LOG_LEVEL == "INFO"
    assert "%(message)s" in settings.LOG_FORMAT


def test_prefixed_level_wins(clean_env):
    clean_env.setenv("LOG_LEVEL", "error")
    assert Settings.load().LOG_LEVEL == "ERROR"

    clean_env.setenv("PRELUDE_LOG_LEVEL", "debug")
    assert Settings.load().LOG_LEVEL == "DEBUG"


def test_custom_format(clean_env):
    clean_env.setenv("PRELUDE_LOG_FORMAT", "%(levelname)s %(message)s")
    assert Settings.load().LOG_FORMAT == "%(levelname)s %(message)s"


def test_invalid_level_fails(clean_env):
    clean_env.setenv("PRELUDE_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings.load()


def test_setup_logger_configures_once():
    name = "prelude.test_setup_logger"
    first = setup_logger(name=name, level="WARNING")
    second = setup_logger(name=name, level="DEBUG")

    assert first is second
    assert first.level == logging.WARNING
    assert len(first.handlers) == 1
    assert first.propagate is False


@pytest.mark.parametrize("level, expected", [("warn", "WARN"), ("fatal", "FATAL")])
def test_logging_aliases_accepted(clean_env, level, expected):
    clean_env.setenv("LOG_LEVEL", level)
    settings = Settings.load()

    assert settings.LOG_LEVEL == expected
    assert isinstance(getattr(logging, settings.LOG_LEVEL), int)


def test_unusable_shared_level_falls_back_to_default(clean_env):
    clean_env.setenv("LOG_LEVEL", "verbose")
    assert Settings.load().LOG_LEVEL == "INFO"


def test_import_with_shared_warn_level(clean_env):
    import importlib
    import prelude.core.config as config

    clean_env.setenv("LOG_LEVEL", "warn")
    reloaded = importlib.reload(config)
    try:
        assert reloaded.settings.LOG_LEVEL == "WARN"
    finally:
        clean_env.delenv("LOG_LEVEL")
        importlib.reload(config)
