from __future__ import annotations

import logging
from typing import List, Optional

from .ledger import ResultLedger
from .models import Process, Result, ScheduledSlice
from .queues import ProcessQueue

logger = logging.getLogger(__name__)


def execute_pass(
    queue: ProcessQueue,
    quantum: int,
    clock: int,
    ledger: ResultLedger,
    timeline: Optional[List[ScheduledSlice]] = None,
) -> int:
    """
    Sweep the queue once from left to right and return the advanced clock.

    Each process gets at most one quantum. Finished processes are recorded in
    the ledger and dropped from the queue; unfinished ones stay where they are
    with their remaining burst reduced, and are not revisited in this sweep.
    """
    if not len(queue):
        logger.info("Queue %s is empty", queue.tier.name)
        return clock

    survivors: List[Process] = []
    for p in queue:
        if clock < p.arrival_time:
            clock = p.arrival_time

        # Never run a negative slice, so a negative burst cannot rewind the clock.
        run_time = max(0, min(p.remaining_burst, quantum))
        logger.info("Processing PID %s for %d units", p.pid, run_time)

        start_time = clock
        clock += run_time
        p.remaining_burst -= run_time

        if timeline is not None:
            timeline.append(
                ScheduledSlice(
                    pid=p.pid,
                    tier=queue.tier.name,
                    start_time=start_time,
                    end_time=clock,
                    completed=p.remaining_burst <= 0,
                )
            )

        if p.remaining_burst <= 0:
            ledger.append(
                Result(
                    pid=p.pid,
                    arrival_time=p.arrival_time,
                    burst_time=p.burst_time,
                    completion_time=clock,
                )
            )
            logger.debug("PID %s completed at t=%d", p.pid, clock)
        else:
            survivors.append(p)

    queue.replace(survivors)
    return clock


def execute_until_empty(
    queue: ProcessQueue,
    quantum: int,
    clock: int,
    ledger: ResultLedger,
    timeline: Optional[List[ScheduledSlice]] = None,
) -> int:
    """
    Round-robin within one tier: repeat single sweeps until the queue drains.
    """
    if quantum <= 0:
        raise ValueError("Cyclic scheduling requires a positive quantum")

    clock = execute_pass(queue, quantum, clock, ledger, timeline)
    while len(queue):
        clock = execute_pass(queue, quantum, clock, ledger, timeline)
    return clock
