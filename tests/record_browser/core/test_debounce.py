from __future__ import annotations

import pytest

from record_browser.core.debounce import Debouncer, ManualClock

# Dyadic delays/steps keep the float clock arithmetic exact.
DELAY = 0.5


def test_burst_collapses_into_last_call_after_quiet_period():
    clock = ManualClock()
    calls = []
    deb = Debouncer(DELAY, clock)

    for value in ["a", "ab", "abc"]:
        deb.schedule(calls.append, value)
        clock.advance(0.125)

    assert deb.fire_due() is False
    assert calls == []

    clock.advance(0.375)
    assert deb.fire_due() is True
    assert calls == ["abc"]

    # nothing left to fire
    clock.advance(1.0)
    assert deb.fire_due() is False
    assert calls == ["abc"]


def test_new_schedule_cancels_previous_token():
    deb = Debouncer(DELAY, ManualClock())

    first = deb.schedule(lambda: None)
    second = deb.schedule(lambda: None)

    assert first.cancelled
    assert not second.cancelled
    assert deb.pending is second


def test_each_input_restarts_the_quiet_period():
    clock = ManualClock()
    calls = []
    deb = Debouncer(DELAY, clock)

    deb.schedule(calls.append, 1)
    clock.advance(0.375)
    deb.schedule(calls.append, 2)
    clock.advance(0.375)

    assert deb.fire_due() is False
    clock.advance(0.125)
    assert deb.fire_due() is True
    assert calls == [2]


def test_cancel_and_flush():
    clock = ManualClock()
    calls = []
    deb = Debouncer(DELAY, clock)

    deb.schedule(calls.append, "x")
    deb.cancel()
    clock.advance(1)
    assert deb.fire_due() is False

    deb.schedule(calls.append, "y")
    assert deb.flush() is True
    assert calls == ["y"]
    assert deb.pending is None


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        Debouncer(-1)
