from __future__ import annotations

from typing import Optional, Sequence, Tuple

from fuelops.data.models import DailySummary


def pct_change(current: Optional[float], previous: Optional[float]) -> Optional[float]:
    if current is None or previous in (None, 0):
        return None
    try:
        return ((current - previous) / previous) * 100
    except ZeroDivisionError:
        return None


def latest_and_previous(
    summaries: Sequence[DailySummary],
) -> Tuple[Optional[DailySummary], Optional[DailySummary]]:
    if not summaries:
        return None, None
    ordered = sorted(summaries, key=lambda s: s.date)
    latest = ordered[-1]
    previous = ordered[-2] if len(ordered) > 1 else None
    return latest, previous


def day_over_day(summaries: Sequence[DailySummary], attr: str) -> Optional[float]:
    """Percent change of a DailySummary field between the two latest days."""
    latest, previous = latest_and_previous(summaries)
    if latest is None or previous is None:
        return None
    return pct_change(getattr(latest, attr), getattr(previous, attr))
