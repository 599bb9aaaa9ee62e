"""Stack capture against the running interpreter."""

from __future__ import annotations

import logging
import sys
from typing import List, Protocol, Tuple, runtime_checkable

from .frame import Frame

logger = logging.getLogger(__name__)


@runtime_checkable
class StackWalker(Protocol):
    """Capability that records the active call chain."""

    def capture_frames(self, skip: int, limit: int) -> Tuple[Frame, ...]:
        """
        Record up to ``limit`` frames, innermost first.

        Args:
            skip: Frames to skip above the caller of ``capture_frames``.
                ``0`` records the caller itself.
            limit: Maximum number of frames to record.
        """
        ...


def _validate_capture_args(skip: int, limit: int) -> None:
    if skip < 0:
        raise ValueError(f"skip must be non-negative (got {skip})")
    if limit < 1:
        raise ValueError(f"limit must be at least 1 (got {limit})")


class InspectStackWalker:
    """Walks ``f_back`` links starting from ``sys._getframe``.

    Only the calling thread's own frames are read, so concurrent captures need
    no coordination.
    """

    def capture_frames(self, skip: int, limit: int) -> Tuple[Frame, ...]:
        _validate_capture_args(skip, limit)
        try:
            # +1 skips capture_frames itself
            current = sys._getframe(skip + 1)
        except ValueError:
            logger.debug("Call stack shallower than %d frames; capturing nothing", skip + 1)
            return ()

        frames: List[Frame] = []
        while current is not None and len(frames) < limit:
            frames.append(Frame.from_frame(current))
            current = current.f_back

        if current is not None:
            logger.debug("Stack capture truncated at %d frames", limit)
        return tuple(frames)


__all__ = ["InspectStackWalker", "StackWalker"]
