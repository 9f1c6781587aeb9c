"""Reconciliation of credited time against syllabus requirements.

Over-credit is allowed: remaining floors at zero and the category is
reported as over-credited, never rejected.
"""

from collections.abc import Iterable, Mapping

from plar.credits.categories import TimeCategory


def remaining_minutes(requirement: int, effective: int) -> int:
    return max(0, requirement - effective)


def compute_remaining(
    effective_totals: Mapping[TimeCategory, int],
    requirements: Mapping[TimeCategory, int],
    categories: Iterable[TimeCategory],
) -> dict[TimeCategory, int]:
    """Remaining minutes per category, floored at zero.

    Args:
        effective_totals: Credited totals after overrides
        requirements: Required minutes per category (missing means 0)
        categories: Tracked categories; each appears in the result

    Returns:
        Category -> max(0, requirement - effective)
    """
    return {
        category: remaining_minutes(requirements.get(category, 0), effective_totals.get(category, 0))
        for category in categories
    }


def over_credited(
    effective_totals: Mapping[TimeCategory, int],
    requirements: Mapping[TimeCategory, int],
    categories: Iterable[TimeCategory],
) -> set[TimeCategory]:
    """Categories whose effective credited total exceeds the requirement."""
    return {
        category
        for category in categories
        if effective_totals.get(category, 0) > requirements.get(category, 0)
    }


def completion_percent(effective: int, requirement: int) -> float:
    """Share of the requirement covered, capped at 100.

    A zero requirement is already satisfied.
    """
    if requirement <= 0:
        return 100.0
    return min(100.0, effective / requirement * 100)
