import pytest

from statstar.render.transitions import EntranceTransition, TransitionHandle, ease_out


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_ease_out_endpoints():
    assert ease_out(0.0) == 0.0
    assert ease_out(1.0) == 1.0
    assert ease_out(0.5) == pytest.approx(0.875)
    assert ease_out(2.0) == 1.0


def test_sample_holds_start_frame_during_delay():
    frame = EntranceTransition().sample(0.02)
    assert (frame.scale, frame.opacity, frame.finished) == (0.0, 0.0, False)


def test_sample_midway_and_end():
    transition = EntranceTransition(delay=0.05, duration=0.5)

    mid = transition.sample(0.05 + 0.25)
    assert mid.scale == pytest.approx(0.875)
    assert mid.opacity == pytest.approx(0.875)
    assert not mid.finished

    end = transition.sample(0.55)
    assert (end.scale, end.opacity, end.finished) == (1.0, 1.0, True)


def test_negative_timing_rejected():
    with pytest.raises(ValueError):
        EntranceTransition(duration=-1.0)


def test_handle_follows_clock_and_cancel_snaps_to_end():
    clock = FakeClock()
    handle = TransitionHandle(EntranceTransition(), clock=clock)
    assert handle.frame().scale == 0.0

    clock.now += 0.3
    assert 0.0 < handle.frame().scale < 1.0
    assert not handle.finished

    handle.cancel()
    assert handle.finished
    assert handle.frame().opacity == 1.0
