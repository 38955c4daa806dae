from __future__ import annotations

from typing import Iterable, List, Optional

from .models import MetricsReport, ProcessMetrics, Result, ScheduledSlice, SystemMetrics


def process_metrics(result: Result) -> ProcessMetrics:
    turnaround_time = result.completion_time - result.arrival_time
    return ProcessMetrics(
        pid=result.pid,
        arrival_time=result.arrival_time,
        burst_time=result.burst_time,
        completion_time=result.completion_time,
        turnaround_time=turnaround_time,
        waiting_time=turnaround_time - result.burst_time,
    )


def compute_system_metrics(timeline: List[ScheduledSlice]) -> SystemMetrics:
    """
    Compute throughput and CPU utilization for the run recorded in the
    timeline. Every figure comes from the timeline alone, so results left in
    the ledger by earlier runs do not skew it.
    """
    if not timeline:
        return SystemMetrics(cpu_busy_time=0, makespan=0, throughput=0.0, cpu_utilization=0.0)

    makespan = max(slice_.end_time for slice_ in timeline)
    cpu_busy_time = sum(slice_.end_time - slice_.start_time for slice_ in timeline)
    completed = sum(1 for slice_ in timeline if slice_.completed)

    throughput = completed / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    return SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        makespan=makespan,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
    )


def build_report(
    results: Iterable[Result],
    timeline: Optional[List[ScheduledSlice]] = None,
) -> Optional[MetricsReport]:
    """
    Per-process table plus average waiting and turnaround time.

    Returns None when there are no results, since there is nothing to average.
    """
    processes = [process_metrics(r) for r in results]
    if not processes:
        return None

    n = len(processes)
    return MetricsReport(
        processes=processes,
        avg_waiting=sum(p.waiting_time for p in processes) / n,
        avg_turnaround=sum(p.turnaround_time for p in processes) / n,
        system=compute_system_metrics(timeline or []),
    )
