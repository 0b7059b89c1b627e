"""Greedy job sequencing and fractional knapsack."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Job:
    """A unit-time job earning ``profit`` if done by ``deadline``."""

    id: int
    deadline: int
    profit: int


@dataclass(frozen=True)
class Item:
    """An item that may be taken whole or in part."""

    value: int
    weight: int


def job_scheduling(jobs: Iterable[Job]) -> tuple[int, int]:
    """Return the number of jobs done and the total profit.

    Jobs are taken by falling profit, each in the latest free slot before
    its deadline. A job with zero profit is not counted as done.
    """
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    horizon = max((job.deadline for job in ordered), default=0)
    slots = [0] * max(horizon, 0)
    for job in ordered:
        for slot in range(min(job.deadline, len(slots)) - 1, -1, -1):
            if slots[slot] == 0:
                slots[slot] = job.profit
                break
    return sum(1 for profit in slots if profit != 0), sum(slots)


def fractional_knapsack(capacity: int, items: Iterable[Item]) -> float:
    """Largest value that fits in ``capacity`` when items may be split.

    Raises ValueError for an item without positive weight.
    """
    ratios: list[tuple[float, int]] = []
    for item in items:
        if item.weight <= 0:
            raise ValueError(f"item weight must be positive, got {item.weight}")
        ratios.append((item.value / item.weight, item.weight))
    ratios.sort(key=lambda pair: pair[0], reverse=True)
    total = 0.0
    used = 0
    for ratio, weight in ratios:
        if used + weight <= capacity:
            total += ratio * weight
            used += weight
        else:
            total += (capacity - used) * ratio
            break
    return total