"""Virtual-clock scheduler."""

from __future__ import annotations

import pytest

from backend.engine.gameclock import TickScheduler


def test_action_runs_only_once_due() -> None:
    sched = TickScheduler()
    fired: list[int] = []
    sched.schedule_after(100, lambda: fired.append(sched.now_ms))

    assert sched.advance(99) == 0
    assert fired == []
    assert sched.advance(1) == 1
    assert fired == [100]
    assert sched.advance(1000) == 0
    assert sched.now_ms == 1100


def test_due_order_then_insertion_order() -> None:
    sched = TickScheduler()
    order: list[str] = []
    sched.schedule_after(50, lambda: order.append("b"))
    sched.schedule_after(10, lambda: order.append("a"))
    sched.schedule_after(50, lambda: order.append("c"))

    sched.advance(50)
    assert order == ["a", "b", "c"]


def test_actions_scheduled_inside_the_window_run_in_same_advance() -> None:
    sched = TickScheduler()
    times: list[int] = []

    def tick() -> None:
        times.append(sched.now_ms)
        if len(times) < 5:
            sched.schedule_after(30, tick)

    sched.schedule_after(30, tick)
    sched.advance(100)
    assert times == [30, 60, 90]
    sched.advance(100)
    assert times == [30, 60, 90, 120, 150]


def test_cancelled_handle_never_fires() -> None:
    sched = TickScheduler()
    fired: list[str] = []
    handle = sched.schedule_after(10, lambda: fired.append("x"))
    assert sched.pending == 1

    handle.cancel()
    handle.cancel()  # idempotent
    assert handle.cancelled
    assert sched.pending == 0
    sched.advance(100)
    assert fired == []


def test_clear_drops_everything() -> None:
    sched = TickScheduler()
    fired: list[int] = []
    for delay in (1, 2, 3):
        sched.schedule_after(delay, lambda d=delay: fired.append(d))
    sched.clear()
    sched.advance(10)
    assert fired == []
    assert sched.pending == 0


@pytest.mark.parametrize("call", ["schedule", "advance"])
def test_negative_time_is_rejected(call: str) -> None:
    sched = TickScheduler()
    with pytest.raises(ValueError):
        if call == "schedule":
            sched.schedule_after(-1, lambda: None)
        else:
            sched.advance(-1)
