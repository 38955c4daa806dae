from __future__ import annotations

from typing import Iterable, Iterator, List

from .models import TIERS, Process, Tier


class ProcessQueue:
    """
    Pending processes of one tier, kept in admission order until sorted.
    """

    def __init__(self, tier: Tier, processes: Iterable[Process] = ()) -> None:
        self.tier = tier
        self._items: List[Process] = list(processes)

    def append(self, process: Process) -> None:
        self._items.append(process)

    def replace(self, processes: Iterable[Process]) -> None:
        self._items = list(processes)

    def clear(self) -> None:
        self._items.clear()

    def __iter__(self) -> Iterator[Process]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Process:
        return self._items[index]

    def __setitem__(self, index: int, process: Process) -> None:
        self._items[index] = process

    def __repr__(self) -> str:
        pids = ", ".join(str(p.pid) for p in self._items)
        return f"ProcessQueue({self.tier.name}: [{pids}])"


def tier_for_priority(priority: int) -> Tier:
    """
    Map a priority to its tier. The lowest tier has no lower bound, so every
    integer lands somewhere.
    """
    for tier in TIERS:
        if tier.min_priority is None or priority >= tier.min_priority:
            return tier
    return TIERS[-1]


def order_by_arrival(queue: ProcessQueue) -> ProcessQueue:
    """
    Bubble-sort the queue in place by arrival time.

    Only strictly later arrivals are swapped, so processes that arrive at the
    same time keep their admission order. Each pass pushes the latest arrival
    of the unsorted prefix to its end, and sorting stops after the first pass
    without a swap.
    """
    end = len(queue)
    swapped = True
    while swapped and end > 1:
        swapped = False
        for i in range(end - 1):
            if queue[i].arrival_time > queue[i + 1].arrival_time:
                queue[i], queue[i + 1] = queue[i + 1], queue[i]
                swapped = True
        end -= 1
    return queue
