import logging

import pytest

from stackerror.stack_error_helpers import InspectStackWalker, StackWalker


def _capture_here(walker, skip=0, limit=20):
    return walker.capture_frames(skip, limit)


def _outer(walker):
    return _capture_here(walker, skip=1)


def test_skip_zero_records_direct_caller() -> None:
    frames = _capture_here(InspectStackWalker())

    assert frames[0].symbol == f"{__name__}._capture_here"
    assert frames[1].symbol.endswith("test_skip_zero_records_direct_caller")


def test_skip_moves_anchor_outward() -> None:
    frames = _outer(InspectStackWalker())

    assert frames[0].symbol == f"{__name__}._outer"


def test_limit_bounds_capture(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="stackerror.stack_error_helpers.stack_walker"):
        frames = _capture_here(InspectStackWalker(), limit=2)

    assert len(frames) == 2
    assert "truncated at 2 frames" in caplog.text


def test_excessive_skip_returns_empty(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="stackerror.stack_error_helpers.stack_walker"):
        frames = InspectStackWalker().capture_frames(100_000, 20)

    assert frames == ()
    assert "capturing nothing" in caplog.text


@pytest.mark.parametrize(("skip", "limit"), [(-1, 5), (0, 0)])
def test_invalid_arguments_rejected(skip, limit) -> None:
    with pytest.raises(ValueError):
        InspectStackWalker().capture_frames(skip, limit)


def test_inspect_walker_satisfies_protocol(fake_walker_factory) -> None:
    assert isinstance(InspectStackWalker(), StackWalker)
    assert isinstance(fake_walker_factory(), StackWalker)
