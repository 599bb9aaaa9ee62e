"""Error value that pairs an underlying error with a captured call stack.

Re-wrapping never nests: a StackError built around another StackError takes
over the inner child and only the most recent frame list is kept.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from .config.settings import DEFAULT_MAX_FRAMES
from .stack_error_helpers.frame import Frame
from .stack_error_helpers.renderer import render_stack_error


class StackError(Exception):
    """Traced wrapper around a child error."""

    def __init__(self, child: BaseException, frames: Iterable[Frame] = (), *, limit: int = DEFAULT_MAX_FRAMES) -> None:
        if not isinstance(child, BaseException):
            raise TypeError(f"StackError child must be an exception (got {type(child).__name__})")
        if limit < 1:
            raise ValueError(f"limit must be at least 1 (got {limit})")
        if isinstance(child, StackError):
            child = child.child

        super().__init__(child)
        self._child = child
        self._frames: Tuple[Frame, ...] = tuple(frames)[:limit]
        self._limit = limit
        self.__cause__ = child

    @property
    def child(self) -> BaseException:
        """The original error; never a StackError."""
        return self._child

    @property
    def frames(self) -> Tuple[Frame, ...]:
        """Captured frames, innermost first."""
        return self._frames

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def truncated(self) -> bool:
        return len(self._frames) == self._limit

    def __str__(self) -> str:
        return render_stack_error(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(child={self._child!r}, frames={len(self._frames)})"


__all__ = ["StackError"]
