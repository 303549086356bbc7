import pytest

from route_telemetry.events.log import EventLog
from route_telemetry.types import ExecutionEvent


def _event(index: int) -> ExecutionEvent:
    return ExecutionEvent(route="pattern", latency_ms=float(index), success=True, timestamp=float(index))


def test_event_log_keeps_insertion_order_below_capacity() -> None:
    log = EventLog(capacity=5)
    for i in range(3):
        log.append(_event(i))

    assert len(log) == 3
    assert [event.latency_ms for event in log.snapshot()] == [0.0, 1.0, 2.0]


def test_event_log_evicts_oldest_first_on_overflow() -> None:
    log = EventLog(capacity=4)
    for i in range(11):
        log.append(_event(i))

    assert len(log) == 4
    assert [event.latency_ms for event in log.snapshot()] == [7.0, 8.0, 9.0, 10.0]


def test_snapshot_is_immutable_and_detached() -> None:
    log = EventLog(capacity=3)
    log.append(_event(0))
    snapshot = log.snapshot()

    log.append(_event(1))

    assert isinstance(snapshot, tuple)
    assert len(snapshot) == 1
    assert len(log.snapshot()) == 2


def test_tail_returns_most_recent_events() -> None:
    log = EventLog(capacity=3)
    for i in range(5):
        log.append(_event(i))

    assert [event.latency_ms for event in log.tail(2)] == [3.0, 4.0]
    assert log.tail(0) == ()
    assert len(log.tail(10)) == 3


def test_event_log_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError):
        EventLog(capacity=0)
