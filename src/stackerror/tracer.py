"""Creation and re-wrapping of StackError values.

``new`` and ``extend`` anchor the capture at their own caller, so the first
recorded frame is always the code that asked for the trace.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from .config.settings import load_tracer_settings
from .stack_error import StackError
from .stack_error_helpers.stack_walker import InspectStackWalker, StackWalker

logger = logging.getLogger(__name__)

# Frames between the walker's caller (_wrap) and user code: _wrap's caller is new/extend.
_ENTRY_SKIP = 2

_default_lock = threading.Lock()
_DEFAULT_TRACER: Optional["StackTracer"] = None


class StackTracer:
    """Builds StackError values with a given walker and frame cap."""

    def __init__(self, walker: Optional[StackWalker] = None, max_frames: Optional[int] = None) -> None:
        if max_frames is None:
            max_frames = load_tracer_settings().max_frames
        if max_frames < 1:
            raise ValueError(f"max_frames must be at least 1 (got {max_frames})")
        self.walker: StackWalker = walker if walker is not None else InspectStackWalker()
        self.max_frames = max_frames

    def new(self, message: str) -> StackError:
        """Create a traced error carrying ``message``."""
        return self._wrap(Exception(message))

    def extend(self, error: BaseException) -> StackError:
        """Wrap ``error`` with a fresh trace, dropping any previous one."""
        return self._wrap(error)

    def _wrap(self, error: BaseException) -> StackError:
        if not isinstance(error, BaseException):
            raise TypeError(f"Can only trace exceptions (got {type(error).__name__})")
        frames = self.walker.capture_frames(_ENTRY_SKIP, self.max_frames)
        child = error.child if isinstance(error, StackError) else error
        return StackError(child, frames, limit=self.max_frames)


def default_tracer() -> StackTracer:
    """Return the process-wide tracer, building it from the environment on first use.

    Never raises: a bad ``STACKERROR_MAX_FRAMES`` falls back to the default cap.
    """
    global _DEFAULT_TRACER
    tracer = _DEFAULT_TRACER
    if tracer is not None:
        return tracer
    with _default_lock:
        if _DEFAULT_TRACER is None:
            _DEFAULT_TRACER = StackTracer()
            logger.debug("Default tracer created with max_frames=%d", _DEFAULT_TRACER.max_frames)
        return _DEFAULT_TRACER


def reset_default_tracer() -> None:
    """Forget the cached default tracer so the next use re-reads the environment."""
    global _DEFAULT_TRACER
    with _default_lock:
        _DEFAULT_TRACER = None


def new(message: str) -> StackError:
    """Create a traced error whose first frame is the caller of ``new``."""
    return default_tracer()._wrap(Exception(message))


def extend(error: BaseException) -> StackError:
    """Wrap ``error`` with a trace anchored at the caller of ``extend``.

    An incoming StackError contributes only its child; its frames are replaced.
    """
    return default_tracer()._wrap(error)


__all__ = ["StackTracer", "default_tracer", "extend", "new", "reset_default_tracer"]
