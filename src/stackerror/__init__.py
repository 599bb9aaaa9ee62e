"""Errors that carry the call stack from where they were raised or passed on.

Typical use::

    from stackerror import extend, new

    def load(path):
        try:
            return read(path)
        except OSError as exc:
            raise extend(exc) from exc

Wrapping an already traced error replaces its frames rather than nesting, so
the rendered text lists one stack, taken at the most recent wrap.
"""

from .config import DEFAULT_MAX_FRAMES, ConfigurationError, TracerSettings
from .stack_error import StackError
from .stack_error_helpers import STACK_LIMIT_MARKER, Frame, InspectStackWalker, StackWalker
from .tracer import StackTracer, default_tracer, extend, new, reset_default_tracer

__all__ = [
    "ConfigurationError",
    "DEFAULT_MAX_FRAMES",
    "Frame",
    "InspectStackWalker",
    "STACK_LIMIT_MARKER",
    "StackError",
    "StackTracer",
    "StackWalker",
    "TracerSettings",
    "default_tracer",
    "extend",
    "new",
    "reset_default_tracer",
]
