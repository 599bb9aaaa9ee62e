"""Tracer settings resolved from the environment."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import ConfigurationError
from .runtime import env_int

logger = logging.getLogger(__name__)

DEFAULT_MAX_FRAMES = 20
MAX_FRAMES_ENV = "STACKERROR_MAX_FRAMES"


@dataclass(frozen=True)
class TracerSettings:
    """Configuration for the process-wide default tracer."""

    max_frames: int = DEFAULT_MAX_FRAMES

    def __post_init__(self) -> None:
        if isinstance(self.max_frames, bool) or not isinstance(self.max_frames, int):
            raise ConfigurationError.invalid_value("max_frames", self.max_frames, "Must be an integer")
        if self.max_frames < 1:
            raise ConfigurationError.invalid_value("max_frames", self.max_frames, "Must be at least 1")


def load_tracer_settings() -> TracerSettings:
    """Build :class:`TracerSettings` from ``STACKERROR_MAX_FRAMES`` (default 20).

    An unusable value is logged and replaced by the default, so tracing keeps
    working under a misconfigured environment.
    """

    try:
        max_frames = env_int(MAX_FRAMES_ENV, or_value=DEFAULT_MAX_FRAMES)
        settings = TracerSettings(max_frames=DEFAULT_MAX_FRAMES if max_frames is None else max_frames)
    except ConfigurationError as exc:
        logger.warning("Ignoring %s: %s; using %d", MAX_FRAMES_ENV, exc, DEFAULT_MAX_FRAMES)
        return TracerSettings()

    if settings.max_frames != DEFAULT_MAX_FRAMES:
        logger.debug("Using stack frame cap %d from %s", settings.max_frames, MAX_FRAMES_ENV)
    return settings


__all__ = ["DEFAULT_MAX_FRAMES", "MAX_FRAMES_ENV", "TracerSettings", "load_tracer_settings"]
