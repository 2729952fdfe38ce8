import pytest
from dungeon_engine.core.scheduler import Scheduler

def test_callback_runs_when_due(scheduler):
    calls = []
    scheduler.call_later(1.0, lambda: calls.append("fired"))

    assert scheduler.update(0.5) == 0
    assert calls == []

    assert scheduler.update(0.5) == 1
    assert calls == ["fired"]
    assert scheduler.time == pytest.approx(1.0)

def test_callbacks_run_in_due_order(scheduler):
    calls = []
    scheduler.call_later(2.0, lambda: calls.append("late"))
    scheduler.call_later(1.0, lambda: calls.append("early"))
    scheduler.call_later(1.0, lambda: calls.append("early second"))

    scheduler.update(5.0)

    assert calls == ["early", "early second", "late"]

def test_cancel_before_due(scheduler):
    calls = []
    task = scheduler.call_later(1.0, lambda: calls.append("fired"))

    assert task.cancel()
    scheduler.update(2.0)

    assert calls == []
    assert not task.pending
    assert scheduler.pending == []

def test_cancel_after_fired_returns_false(scheduler):
    task = scheduler.call_later(0.0, lambda: None)
    scheduler.update(0.0)

    assert task.fired
    assert not task.cancel()

def test_callback_can_cancel_a_later_task(scheduler):
    calls = []
    second = None

    def first():
        calls.append("first")
        second.cancel()

    scheduler.call_later(1.0, first)
    second = scheduler.call_later(1.0, lambda: calls.append("second"))

    assert scheduler.update(1.0) == 1
    assert calls == ["first"]

def test_task_scheduled_during_update_waits(scheduler):
    calls = []

    def chain():
        calls.append("outer")
        scheduler.call_later(0.0, lambda: calls.append("inner"))

    scheduler.call_later(0.0, chain)
    scheduler.update(0.0)
    assert calls == ["outer"]

    scheduler.update(0.0)
    assert calls == ["outer", "inner"]

def test_failing_callback_is_logged_not_raised(scheduler, caplog):
    calls = []

    def broken():
        raise ValueError("boom")

    scheduler.call_later(0.0, broken)
    scheduler.call_later(0.0, lambda: calls.append("ok"))

    assert scheduler.update(0.0) == 2
    assert calls == ["ok"]
    assert "failed" in caplog.text

def test_cancel_all(scheduler):
    scheduler.call_later(1.0, lambda: None)
    scheduler.call_later(2.0, lambda: None)

    assert scheduler.cancel_all() == 2
    assert scheduler.pending == []

def test_negative_delay_is_immediate():
    scheduler = Scheduler()
    calls = []
    scheduler.call_later(-5.0, lambda: calls.append(1))
    scheduler.update(0.0)
    assert calls == [1]
