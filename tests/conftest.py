"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import pytest

from stackerror.stack_error_helpers import Frame
from stackerror.tracer import reset_default_tracer


class FakeStackWalker:
    """Returns a scripted frame sequence and records each capture request."""

    def __init__(self, frames: Sequence[Frame] = ()):
        self.frames = list(frames)
        self.calls: List[Tuple[int, int]] = []

    def capture_frames(self, skip: int, limit: int) -> Tuple[Frame, ...]:
        self.calls.append((skip, limit))
        return tuple(self.frames[:limit])


def make_frames(count: int, *, file: str = "app/service.py") -> List[Frame]:
    """Build ``count`` distinct frames, innermost first."""
    return [Frame(file=file, line=10 + index, symbol=f"app.service.level_{index}") for index in range(count)]


@pytest.fixture(autouse=True)
def isolated_default_tracer(monkeypatch):
    """Each test builds the default tracer from a clean environment."""
    monkeypatch.delenv("STACKERROR_MAX_FRAMES", raising=False)
    reset_default_tracer()
    yield
    reset_default_tracer()


@pytest.fixture
def fake_walker_factory():
    return FakeStackWalker


@pytest.fixture
def frame_factory():
    return make_frames
