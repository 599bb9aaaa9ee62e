from __future__ import annotations

import logging

import pytest

from stackerror import logging_config
from stackerror.config import ConfigurationError


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)

    yield root

    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_setup_logging_installs_console_handler(clean_root_logger, monkeypatch):
    monkeypatch.delenv(logging_config.LOG_LEVEL_ENV, raising=False)

    handler = logging_config.setup_logging()

    assert handler in clean_root_logger.handlers
    assert clean_root_logger.level == logging.INFO
    assert "%(levelname)s" in handler.formatter._fmt


def test_setup_logging_is_idempotent(clean_root_logger):
    logging_config.setup_logging("DEBUG")
    logging_config.setup_logging("WARNING")

    named = [h for h in clean_root_logger.handlers if h.get_name() == "stackerror-console"]
    assert len(named) == 1
    assert clean_root_logger.level == logging.WARNING


def test_level_and_mode_from_environment(clean_root_logger, monkeypatch):
    monkeypatch.setenv(logging_config.LOG_LEVEL_ENV, "debug")
    monkeypatch.setenv(logging_config.USER_FRIENDLY_ENV, "yes")

    handler = logging_config.setup_logging()

    assert handler.level == logging.DEBUG
    assert handler.formatter._fmt == "%(message)s"


def test_unknown_level_rejected(clean_root_logger):
    with pytest.raises(ConfigurationError):
        logging_config.setup_logging("LOUD")
