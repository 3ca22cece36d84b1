import pytest

from utils import IntervalTimer


def test_fires_once_per_interval():
    timer = IntervalTimer(1.0)
    fired = [timer.advance(0.25) for _ in range(8)]
    assert fired == [False, False, False, True, False, False, False, True]


def test_leftover_time_carries_over():
    timer = IntervalTimer(1.0)
    assert timer.advance(0.75) is False
    assert timer.advance(0.5) is True
    assert timer.advance(0.5) is False
    assert timer.advance(0.25) is True


def test_stall_fires_only_once():
    timer = IntervalTimer(1.0)
    assert timer.advance(10.0) is True
    assert timer.advance(0.5) is False


def test_reset_restarts_interval():
    timer = IntervalTimer(1.0)
    timer.advance(0.75)
    timer.reset()
    assert timer.advance(0.75) is False
    assert timer.advance(0.25) is True


def test_non_positive_interval_rejected():
    with pytest.raises(ValueError):
        IntervalTimer(0)
