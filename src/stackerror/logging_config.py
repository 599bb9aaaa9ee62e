"""
Logging configuration for applications that embed the tracer.

The library itself only emits through module loggers; call ``setup_logging``
from an entry point to get console output with a consistent format:
- Console output to stdout
- Level from ``STACKERROR_LOG_LEVEL`` (default INFO)
- User-friendly mode (message only) via ``STACKERROR_LOG_USER_FRIENDLY``
"""

import logging
import sys
import threading
from typing import Optional, Union

from .config import ConfigurationError, env_bool, env_str

_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_HANDLER_NAME = "stackerror-console"

LOG_LEVEL_ENV = "STACKERROR_LOG_LEVEL"
USER_FRIENDLY_ENV = "STACKERROR_LOG_USER_FRIENDLY"


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = env_str(LOG_LEVEL_ENV, or_value="INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ConfigurationError.invalid_value(LOG_LEVEL_ENV, level, "Expected a logging level name")
    return resolved


def _build_console_handler(user_friendly: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(
            "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setFormatter(formatter)
    return console_handler


def _remove_existing_handler(root_logger: logging.Logger) -> None:
    for handler in list(root_logger.handlers):
        if handler.get_name() != _HANDLER_NAME:
            continue
        root_logger.removeHandler(handler)
        try:
            handler.close()
        except OSError as exc:  # Best-effort cleanup operation
            _MODULE_LOGGER.debug("Handler close failed: %s", exc)


def setup_logging(level: Union[int, str, None] = None, user_friendly: Optional[bool] = None) -> logging.Handler:
    """Install (or replace) the console handler on the root logger."""

    with _config_lock:
        resolved_level = _resolve_level(level)
        if user_friendly is None:
            user_friendly = bool(env_bool(USER_FRIENDLY_ENV, or_value=False))

        root_logger = logging.getLogger()
        _remove_existing_handler(root_logger)

        console_handler = _build_console_handler(user_friendly)
        console_handler.setLevel(resolved_level)
        root_logger.addHandler(console_handler)
        root_logger.setLevel(resolved_level)
        return console_handler


__all__ = ["LOG_LEVEL_ENV", "USER_FRIENDLY_ENV", "setup_logging"]
