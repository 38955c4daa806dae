from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Tier:
    """
    One fixed priority band: processes with priority >= min_priority land here
    unless a higher tier claims them first.
    """

    name: str
    min_priority: Optional[int]
    quantum: int


HIGH = Tier(name="high", min_priority=100, quantum=3)
MEDIUM = Tier(name="medium", min_priority=50, quantum=2)
LOW = Tier(name="low", min_priority=None, quantum=1)

# Scheduling order, highest tier first.
TIERS = (HIGH, MEDIUM, LOW)


@dataclass
class Process:
    pid: int
    priority: int
    arrival_time: int
    burst_time: int
    remaining_burst: int = field(init=False)

    def __post_init__(self) -> None:
        self.remaining_burst = self.burst_time


@dataclass(frozen=True)
class Result:
    pid: int
    arrival_time: int
    burst_time: int
    completion_time: int


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: int
    tier: str
    start_time: int
    end_time: int
    # True when the process finished at the end of this slice.
    completed: bool = False


@dataclass
class ProcessMetrics:
    pid: int
    arrival_time: int
    burst_time: int
    completion_time: int
    turnaround_time: int
    waiting_time: int


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    makespan: int
    throughput: float
    cpu_utilization: float


@dataclass
class MetricsReport:
    processes: List[ProcessMetrics] = field(default_factory=list)
    avg_waiting: float = 0.0
    avg_turnaround: float = 0.0
    system: Optional[SystemMetrics] = None
