"""Text rendering for StackError."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..stack_error import StackError

STACK_LIMIT_MARKER = "-- stack limit reached --"


def render_stack_error(error: "StackError") -> str:
    """
    Render the child error followed by one line per frame.

    The limit marker is appended only when the frame count equals the cap,
    since deeper frames were dropped.
    """
    out = f"{error.child} in:\n"
    out += "\n".join(frame.render() for frame in error.frames)
    if error.truncated:
        out += f"\n{STACK_LIMIT_MARKER}\n"
    return out


__all__ = ["STACK_LIMIT_MARKER", "render_stack_error"]
