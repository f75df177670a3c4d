"""Per-day activity series and day-by-hour heatmaps built from sessions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta
from typing import Optional, Protocol

_DATE_FORMAT = "%Y-%m-%d"


class _TimedSession(Protocol):
    start_time: Optional[datetime]


def _recent_days(days: int) -> list[str]:
    """Return date keys for the last ``days`` days, oldest first."""
    today = date.today()
    return [
        (today - timedelta(days=days - 1 - offset)).strftime(_DATE_FORMAT)
        for offset in range(days)
    ]


def build_spark_data(counts_by_date: Mapping[str, int], days: int) -> list[int]:
    """Return the counts for each of the last ``days`` days, oldest first."""
    return [counts_by_date.get(key, 0) for key in _recent_days(days)]


def build_cost_spark_data(cost_by_date: Mapping[str, float], days: int) -> list[int]:
    """Return the daily cost in whole cents for the last ``days`` days."""
    return [int(cost_by_date.get(key, 0.0) * 100) for key in _recent_days(days)]


def week_costs(cost_by_date: Mapping[str, float]) -> tuple[float, float]:
    """Return the total cost of the last seven days and of the seven before."""
    today = date.today()
    this_week = 0.0
    last_week = 0.0
    for offset in range(7):
        this_week += cost_by_date.get(
            (today - timedelta(days=offset)).strftime(_DATE_FORMAT), 0.0
        )
        last_week += cost_by_date.get(
            (today - timedelta(days=7 + offset)).strftime(_DATE_FORMAT), 0.0
        )
    return this_week, last_week


def build_heatmap_from_sessions(sessions: Iterable[_TimedSession]) -> list[list[int]]:
    """Count session starts in a 7x24 grid, Monday first, by hour of day.

    Sessions without a start time are skipped.
    """
    grid = [[0] * 24 for _ in range(7)]
    for session in sessions:
        start = session.start_time
        if start is None:
            continue
        grid[start.weekday()][start.hour] += 1
    return grid