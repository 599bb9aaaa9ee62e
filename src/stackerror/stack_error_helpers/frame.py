"""Call-site descriptor recorded by stack capture."""

from __future__ import annotations

from dataclasses import dataclass
from types import FrameType
from typing import Tuple


@dataclass(frozen=True)
class Frame:
    """A single call site: source file, line number and qualified symbol name."""

    file: str
    line: int
    symbol: str

    def __post_init__(self) -> None:
        if self.line < 0:
            raise ValueError(f"Frame line must be non-negative (got {self.line})")

    @property
    def location(self) -> Tuple[str, int]:
        return (self.file, self.line)

    def render(self) -> str:
        """Return ``"<file>: <line> (<symbol>)"``."""
        return f"{self.file}: {self.line} ({self.symbol})"

    @classmethod
    def from_frame(cls, frame: FrameType) -> "Frame":
        """Resolve an interpreter frame into a :class:`Frame`."""
        code = frame.f_code
        module_name = frame.f_globals.get("__name__", "<unknown>")
        qualname = getattr(code, "co_qualname", code.co_name)
        line = frame.f_lineno
        return cls(
            file=code.co_filename,
            line=line if line is not None else 0,
            symbol=f"{module_name}.{qualname}",
        )
