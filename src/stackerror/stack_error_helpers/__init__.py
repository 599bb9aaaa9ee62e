"""Helper modules for StackError."""

from .frame import Frame
from .renderer import STACK_LIMIT_MARKER, render_stack_error
from .stack_walker import InspectStackWalker, StackWalker

__all__ = [
    "Frame",
    "InspectStackWalker",
    "STACK_LIMIT_MARKER",
    "StackWalker",
    "render_stack_error",
]
