"""Aggregation of credited minutes.

Pure functions over the current credited flags. Nothing here caches:
callers recompute on every read.
"""

from collections.abc import Iterable

from plar.credits.categories import TimeCategory
from plar.credits.types import Phase, TrainingEvent


def _sum_minutes(
    events: Iterable[TrainingEvent],
    categories: Iterable[TimeCategory],
) -> dict[TimeCategory, int]:
    totals = {category: 0 for category in categories}
    for event in events:
        for category in totals:
            totals[category] += event.minutes_for(category)
    return totals


def compute_aggregate(
    phases: Iterable[Phase],
    categories: Iterable[TimeCategory],
) -> dict[TimeCategory, int]:
    """Sum minutes per category over every credited event.

    Args:
        phases: All phases of the session
        categories: Tracked categories; each appears in the result

    Returns:
        Category -> credited minutes (0 when nothing contributes)
    """
    credited = (event for phase in phases for event in phase.events if event.credited)
    return _sum_minutes(credited, categories)


def phase_credited_totals(phase: Phase, categories: Iterable[TimeCategory]) -> dict[TimeCategory, int]:
    """The phase's contribution to the aggregate (credited events only)."""
    return _sum_minutes((event for event in phase.events if event.credited), categories)


def phase_totals(phase: Phase, categories: Iterable[TimeCategory]) -> dict[TimeCategory, int]:
    """Total minutes per category over all of a phase's events."""
    return _sum_minutes(phase.events, categories)
