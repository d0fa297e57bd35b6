"""Greedy drills: interval scheduling, coin change, knapsack, jobs and platforms."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item that can be taken whole or in part."""

    value: int
    weight: int


@dataclass(frozen=True)
class Job:
    """A unit-length job that earns ``profit`` if done by ``deadline``."""

    id: int
    deadline: int
    profit: int


def _count_compatible(start: Iterable[int], end: Iterable[int]) -> int:
    intervals = sorted(zip(start, end, strict=True), key=lambda pair: pair[1])
    if not intervals:
        return 0
    count = 1
    finish = intervals[0][1]
    for begin, stop in intervals[1:]:
        if begin > finish:
            count += 1
            finish = stop
    return count


def max_meetings(start: Iterable[int], end: Iterable[int]) -> int:
    """Most meetings one room can hold; a meeting must start after the last one ends."""
    return _count_compatible(start, end)


def activity_selection(start: Iterable[int], end: Iterable[int]) -> int:
    """Most activities one person can do; each starts after the previous one ends."""
    return _count_compatible(start, end)


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Fewest coins that make ``amount``, or -1 if it cannot be made."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    ordered = sorted(coins)
    if any(coin <= 0 for coin in ordered):
        raise ValueError("coin values must be positive")
    unreachable = amount + 1
    best = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        for coin in ordered:
            if coin > total:
                break
            best[total] = min(best[total], best[total - coin] + 1)
    return -1 if best[amount] > amount else best[amount]


def fractional_knapsack(capacity: int, items: Iterable[Item]) -> float:
    """Largest value that fits in ``capacity`` when items may be split."""
    ordered = list(items)
    if any(item.weight <= 0 for item in ordered):
        raise ValueError("item weights must be positive")
    ordered.sort(key=lambda item: item.value / item.weight, reverse=True)
    used = 0
    total = 0.0
    for item in ordered:
        if used + item.weight <= capacity:
            used += item.weight
            total += item.value
        else:
            total += item.value * ((capacity - used) / item.weight)
            break
    return total


def job_scheduling(jobs: Iterable[Job]) -> tuple[int, int]:
    """Schedule jobs greedily by profit; return (jobs done, total profit)."""
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    slots: list[Job | None] = [None] * len(ordered)
    for job in ordered:
        for slot in range(min(len(slots), job.deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job
                break
    done = [job for job in slots if job is not None]
    return len(done), sum(job.profit for job in done)


def find_platform(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Fewest platforms so that no train waits."""
    if len(arrivals) != len(departures):
        raise ValueError("every train needs one arrival and one departure")
    arrive = sorted(arrivals)
    depart = sorted(departures)
    size = len(arrive)
    if size == 0:
        return 0
    count = best = 1
    i, j = 1, 0
    while i < size and j < size:
        if arrive[i] <= depart[j]:
            count += 1
            i += 1
        else:
            count -= 1
            j += 1
        best = max(best, count)
    return best