"""Caller-owned view state for credit screens.

Search filtering and expand/collapse live here, outside the engine.
Nothing in this module changes credited flags or overrides.
"""

from collections.abc import Iterable

from plar.credits.types import Phase, TrainingEvent


def filter_phases(phases: Iterable[Phase], query: str) -> list[tuple[Phase, tuple[TrainingEvent, ...]]]:
    """Filter events by a case-insensitive search on name and description.

    Args:
        phases: Phases in display order
        query: Search text; blank shows everything

    Returns:
        (phase, matching events) pairs, omitting phases with no match
    """
    needle = query.strip().lower()
    if not needle:
        return [(phase, phase.events) for phase in phases]

    results: list[tuple[Phase, tuple[TrainingEvent, ...]]] = []
    for phase in phases:
        matches = tuple(
            event
            for event in phase.events
            if needle in event.name.lower() or needle in event.description.lower()
        )
        if matches:
            results.append((phase, matches))
    return results


class ExpandedPhases:
    """Set of phase ids currently expanded in a view."""

    def __init__(self, phase_ids: Iterable[str] = ()) -> None:
        self._ids: set[str] = set(phase_ids)

    def __contains__(self, phase_id: object) -> bool:
        return phase_id in self._ids

    def toggle(self, phase_id: str) -> bool:
        """Flip one phase. Returns True if it is now expanded."""
        if phase_id in self._ids:
            self._ids.discard(phase_id)
            return False
        self._ids.add(phase_id)
        return True

    def expand_all(self, phases: Iterable[Phase]) -> None:
        self._ids.update(phase.id for phase in phases)

    def collapse_all(self) -> None:
        self._ids.clear()
