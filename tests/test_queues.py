from tiered_scheduler.models import HIGH, LOW, MEDIUM, Process
from tiered_scheduler.queues import ProcessQueue, order_by_arrival, tier_for_priority


def _queue(*arrivals):
    return ProcessQueue(HIGH, [Process(pid=i, priority=100, arrival_time=a, burst_time=1) for i, a in enumerate(arrivals)])


def test_tier_boundaries():
    assert tier_for_priority(100) is HIGH
    assert tier_for_priority(250) is HIGH
    assert tier_for_priority(99) is MEDIUM
    assert tier_for_priority(50) is MEDIUM
    assert tier_for_priority(49) is LOW
    assert tier_for_priority(-5) is LOW


def test_order_by_arrival_sorts():
    q = order_by_arrival(_queue(5, 0, 3, 1))
    assert [p.arrival_time for p in q] == [0, 1, 3, 5]


def test_order_by_arrival_is_stable():
    q = order_by_arrival(_queue(2, 1, 2, 1))
    # pids 1 and 3 arrive at 1, pids 0 and 2 at 2; admission order kept within each
    assert [p.pid for p in q] == [1, 3, 0, 2]


def test_order_by_arrival_is_idempotent():
    q = order_by_arrival(_queue(4, 2, 2, 0, 9))
    once = [p.pid for p in q]
    order_by_arrival(q)
    assert [p.pid for p in q] == once


def test_order_by_arrival_handles_tiny_queues():
    assert len(order_by_arrival(ProcessQueue(LOW))) == 0
    assert [p.pid for p in order_by_arrival(_queue(7))] == [0]
