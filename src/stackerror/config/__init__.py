"""Environment-backed configuration for the tracer."""

from .errors import ConfigurationError
from .runtime import env_bool, env_int, env_str
from .settings import DEFAULT_MAX_FRAMES, MAX_FRAMES_ENV, TracerSettings, load_tracer_settings

__all__ = [
    "ConfigurationError",
    "DEFAULT_MAX_FRAMES",
    "MAX_FRAMES_ENV",
    "TracerSettings",
    "env_bool",
    "env_int",
    "env_str",
    "load_tracer_settings",
]
