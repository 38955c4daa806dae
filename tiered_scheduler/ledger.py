from __future__ import annotations

from typing import Iterator, List

from .models import Result


class ResultLedger:
    """
    Append-only record of completed processes, in completion order.
    """

    def __init__(self) -> None:
        self._results: List[Result] = []

    def append(self, result: Result) -> None:
        self._results.append(result)

    def clear(self) -> None:
        self._results.clear()

    def __iter__(self) -> Iterator[Result]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __bool__(self) -> bool:
        return bool(self._results)
