from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional

from .executor import execute_pass, execute_until_empty
from .ledger import ResultLedger
from .metrics import build_report
from .models import TIERS, MetricsReport, Process, ScheduledSlice, Tier
from .queues import ProcessQueue, order_by_arrival, tier_for_priority

logger = logging.getLogger(__name__)


class SchedulingPolicy(str, Enum):
    # One sweep per tier; unfinished processes wait for the next run.
    SINGLE_PASS = "single-pass"
    # Sweep each tier until it drains (round-robin within the tier).
    CYCLIC = "cyclic"

    @classmethod
    def from_name(cls, name: str) -> "SchedulingPolicy":
        try:
            return cls(name.lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown scheduling policy '{name}' (use {choices})") from None


class Scheduler:
    """
    Three-tier static-priority scheduler.

    Each instance owns its tier queues, simulation clock, result ledger and
    execution trace, so independent simulations never share state. Nothing
    here is locked; callers sharing one instance across threads must
    serialize access themselves.
    """

    def __init__(self, policy: SchedulingPolicy = SchedulingPolicy.SINGLE_PASS) -> None:
        self.policy = SchedulingPolicy(policy)
        self.queues: Dict[str, ProcessQueue] = {tier.name: ProcessQueue(tier) for tier in TIERS}
        self.ledger = ResultLedger()
        self.timeline: List[ScheduledSlice] = []
        self.clock = 0

    def admit(self, process: Process) -> Tier:
        tier = tier_for_priority(process.priority)
        self.queues[tier.name].append(process)
        logger.debug("Admitted PID %s (priority %s) to %s tier", process.pid, process.priority, tier.name)
        return tier

    def admit_many(self, processes: Iterable[Process]) -> None:
        for p in processes:
            self.admit(p)

    def run(self) -> None:
        """
        Run one scheduling pass over every tier, highest first.

        The clock restarts at zero for every run. Completions are appended to
        the ledger, which keeps growing across runs until reset().
        """
        self.clock = 0
        self.timeline = []

        for tier in TIERS:
            order_by_arrival(self.queues[tier.name])

        execute = execute_until_empty if self.policy is SchedulingPolicy.CYCLIC else execute_pass
        for tier in TIERS:
            logger.info("Scheduling %s tier (quantum %d)", tier.name, tier.quantum)
            self.clock = execute(self.queues[tier.name], tier.quantum, self.clock, self.ledger, self.timeline)

    def get_results(self) -> Optional[MetricsReport]:
        """
        Metrics for everything in the ledger, or None if nothing has completed.
        """
        return build_report(self.ledger, self.timeline)

    def pending(self) -> Dict[str, List[Process]]:
        return {name: list(queue) for name, queue in self.queues.items()}

    def reset(self) -> None:
        for queue in self.queues.values():
            queue.clear()
        self.ledger.clear()
        self.timeline = []
        self.clock = 0
        logger.info("System reset complete")
