"""Phase-level tri-state selection.

The state of a phase is always derived from its events' flags. Bulk
toggles write through to every event; nothing is stored at phase level.
"""

from loguru import logger

from plar.credits.errors import InvalidToggleError
from plar.credits.registry import LessonRegistry
from plar.credits.types import Phase, PhaseState


def _require_bool(credited: object) -> bool:
    if not isinstance(credited, bool):
        raise InvalidToggleError("INVALID_TOGGLE", [f"credited must be a bool, got {credited!r}"])
    return credited


def phase_state(phase: Phase) -> PhaseState:
    """Reduce a phase's credited flags to all / none / partial.

    An empty phase has nothing credited and reports NONE.
    """
    credited = phase.credited_count
    if credited == 0:
        return PhaseState.NONE
    if credited == len(phase.events):
        return PhaseState.ALL
    return PhaseState.PARTIAL


class SelectionCoordinator:
    """Applies event and phase credit toggles to a registry."""

    def __init__(self, registry: LessonRegistry) -> None:
        self.registry = registry

    def toggle_event(self, event_id: str, credited: bool) -> Phase:
        """Set one event's credited flag.

        Returns:
            The owning phase, for callers that re-render it

        Raises:
            UnknownIdentifierError: If the event id is not in the catalog
            InvalidToggleError: If credited is not a bool
        """
        _require_bool(credited)
        event = self.registry.get_event(event_id)
        event.credited = credited
        phase = self.registry.phase_of(event_id)
        logger.debug(f"Event {event_id} credited={credited}; phase {phase.id} is {phase_state(phase)}")
        return phase

    def toggle_phase(self, phase_id: str, credited: bool) -> Phase:
        """Set every event in a phase to the same credited flag.

        Raises:
            UnknownIdentifierError: If the phase id is not in the catalog
            InvalidToggleError: If credited is not a bool
        """
        _require_bool(credited)
        phase = self.registry.get_phase(phase_id)
        for event in phase.events:
            event.credited = credited
        logger.debug(f"Phase {phase_id}: {len(phase.events)} event(s) set credited={credited}")
        return phase

    def clear_all(self) -> None:
        for event in self.registry.iter_events():
            event.credited = False
