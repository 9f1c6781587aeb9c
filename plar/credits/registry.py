"""Lesson registry.

Holds the catalog's phases and events for one session and resolves ids.
Structural checks run once at load; afterwards only credited flags change.
"""

from collections.abc import Iterator

from loguru import logger

from plar.credits.categories import TimeCategory
from plar.credits.errors import CatalogError, UnknownIdentifierError
from plar.credits.types import Phase, SyllabusCatalog, TrainingEvent


class LessonRegistry:
    """Id index over a loaded syllabus catalog."""

    def __init__(self, catalog: SyllabusCatalog) -> None:
        _validate_catalog(catalog)
        # The caller's catalog is never mutated; credited flags live in this copy
        catalog = catalog.model_copy(deep=True)
        self.catalog = catalog
        self._phases: dict[str, Phase] = {phase.id: phase for phase in catalog.phases}
        self._events: dict[str, TrainingEvent] = {}
        self._owner: dict[str, str] = {}
        for phase in catalog.phases:
            for event in phase.events:
                self._events[event.id] = event
                self._owner[event.id] = phase.id
        logger.debug(
            f"Loaded registry '{catalog.name}': {len(self._phases)} phases, "
            f"{len(self._events)} events, {len(catalog.categories)} categories"
        )

    @property
    def categories(self) -> tuple[TimeCategory, ...]:
        return self.catalog.categories

    @property
    def phases(self) -> tuple[Phase, ...]:
        return self.catalog.phases

    def iter_events(self) -> Iterator[TrainingEvent]:
        for phase in self.catalog.phases:
            yield from phase.events

    def get_phase(self, phase_id: str) -> Phase:
        """Resolve a phase id.

        Raises:
            UnknownIdentifierError: If the phase is not in the catalog
        """
        phase = self._phases.get(phase_id)
        if phase is None:
            logger.warning(f"Unknown phase id requested: {phase_id!r}")
            raise UnknownIdentifierError("UNKNOWN_PHASE", [f"phase {phase_id!r} is not in the catalog"])
        return phase

    def get_event(self, event_id: str) -> TrainingEvent:
        """Resolve an event id.

        Raises:
            UnknownIdentifierError: If the event is not in the catalog
        """
        event = self._events.get(event_id)
        if event is None:
            logger.warning(f"Unknown event id requested: {event_id!r}")
            raise UnknownIdentifierError("UNKNOWN_EVENT", [f"event {event_id!r} is not in the catalog"])
        return event

    def phase_of(self, event_id: str) -> Phase:
        """Get the phase that owns an event."""
        self.get_event(event_id)
        return self._phases[self._owner[event_id]]

    def require_category(self, category: TimeCategory | str) -> TimeCategory:
        """Resolve a category against the tracked set.

        Raises:
            UnknownIdentifierError: If the category is not tracked by this catalog
        """
        try:
            resolved = TimeCategory(category)
        except ValueError:
            resolved = None
        if resolved is None or resolved not in self.catalog.categories:
            logger.warning(f"Unknown category requested: {category!r}")
            raise UnknownIdentifierError("UNKNOWN_CATEGORY", [f"category {category!r} is not tracked"])
        return resolved

    def requirement(self, category: TimeCategory) -> int:
        return self.catalog.requirements.get(category, 0)

    def requirements(self) -> dict[TimeCategory, int]:
        """Requirements for every tracked category, zero-filled."""
        return {category: self.requirement(category) for category in self.catalog.categories}


def _validate_catalog(catalog: SyllabusCatalog) -> None:
    """Check id uniqueness and category references.

    Raises:
        CatalogError: With one detail line per problem found
    """
    details: list[str] = []
    tracked = set(catalog.categories)

    if not catalog.categories:
        details.append("catalog tracks no categories")
    if len(tracked) != len(catalog.categories):
        details.append("categories contain duplicates")

    for category in catalog.requirements:
        if category not in tracked:
            details.append(f"requirement for untracked category {category.value!r}")

    seen_phases: set[str] = set()
    seen_events: set[str] = set()
    for phase in catalog.phases:
        if phase.id in seen_phases:
            details.append(f"duplicate phase id {phase.id!r}")
        seen_phases.add(phase.id)
        for event in phase.events:
            if event.id in seen_events:
                details.append(f"duplicate event id {event.id!r}")
            seen_events.add(event.id)
            for category in event.minutes:
                if category not in tracked:
                    details.append(f"event {event.id!r} has minutes for untracked category {category.value!r}")

    if details:
        logger.error(f"Catalog '{catalog.name}' failed validation: {details}")
        raise CatalogError("INVALID_CATALOG", details)
