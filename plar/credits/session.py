"""Credit session facade.

One CreditSession is one editing session over one catalog. It wires the
registry, the override layer and the selection coordinator together and
is the only object the presentation layer talks to.

Every read recomputes from current state. There is no cached total that
could lag behind a toggle.
"""

from pathlib import Path

from pydantic import BaseModel

from plar.config.settings import settings
from plar.core.logger import catalog_logger
from plar.credits.aggregate import compute_aggregate, phase_credited_totals, phase_totals
from plar.credits.catalog import load_catalog
from plar.credits.categories import TimeCategory, category_info
from plar.credits.errors import ResetNotRequestedError
from plar.credits.overrides import OverrideLayer
from plar.credits.reconcile import completion_percent, compute_remaining, over_credited, remaining_minutes
from plar.credits.registry import LessonRegistry
from plar.credits.selection import SelectionCoordinator, phase_state
from plar.credits.time_format import parse_minutes
from plar.credits.types import PhaseState, SyllabusCatalog


class CategorySummary(BaseModel):
    category: TimeCategory
    label: str
    requirement: int
    aggregate: int
    override: int | None = None
    effective: int
    remaining: int
    completion_percent: float
    over_credited: bool


class PhaseSummary(BaseModel):
    id: str
    name: str
    state: PhaseState
    credited_count: int
    event_count: int
    progress_percent: float
    totals: dict[TimeCategory, int]
    credited_totals: dict[TimeCategory, int]


class CreditSummary(BaseModel):
    """Read model of a session, rebuilt on every call to summary().

    Attributes:
        categories: Per-category reconciliation in display order
        phases: Per-phase selection state and totals in syllabus order
        total_events: Number of events in the catalog
        credited_events: Number of events currently credited
        progress_percent: credited_events / total_events as 0-100
        reset_pending: Whether a reset is awaiting confirmation
    """

    categories: list[CategorySummary]
    phases: list[PhaseSummary]
    total_events: int
    credited_events: int
    progress_percent: float
    reset_pending: bool = False


class CreditSession:
    """Credit reconciliation state for a single editor."""

    def __init__(self, catalog: SyllabusCatalog) -> None:
        self.registry = LessonRegistry(catalog)
        self.log = catalog_logger(catalog.name)
        self.overrides = OverrideLayer()
        self.selection = SelectionCoordinator(self.registry)
        self._reset_pending = False

    @classmethod
    def from_catalog(cls, catalog: SyllabusCatalog) -> "CreditSession":
        return cls(catalog)

    @classmethod
    def from_file(cls, path: Path | str) -> "CreditSession":
        return cls(load_catalog(path))

    @classmethod
    def from_settings(cls) -> "CreditSession":
        """Start a session from the configured catalog file."""
        return cls.from_file(settings.catalog_path)

    @property
    def categories(self) -> tuple[TimeCategory, ...]:
        return self.registry.categories

    # Mutations

    def toggle_event(self, event_id: str, credited: bool) -> None:
        self.selection.toggle_event(event_id, credited)

    def toggle_phase(self, phase_id: str, credited: bool) -> None:
        self.selection.toggle_phase(phase_id, credited)

    def set_override(self, category: TimeCategory | str, minutes: int) -> None:
        """Store a manual credited total for one category.

        Raises:
            UnknownIdentifierError: If the category is not tracked
            InvalidOverrideError: If minutes is negative or not an integer
        """
        resolved = self.registry.require_category(category)
        self.overrides.set(resolved, minutes)
        self.log.info(f"Manual override set: {resolved.value}={minutes}")

    def enter_override(self, category: TimeCategory | str, text: str) -> bool:
        """Parse H:MM text and store it as an override.

        Malformed text is a no-op: nothing changes and the prior override
        (if any) stays in place. Text equal to the current effective total
        is also a no-op, so leaving a cell unedited does not pin the
        category to its aggregate.

        Returns:
            True if the override was stored, False if nothing changed
        """
        resolved = self.registry.require_category(category)
        minutes = parse_minutes(text)
        if minutes is None:
            self.log.warning(f"Rejected override input for {resolved.value}: {text!r}")
            return False
        if minutes == self.effective_total(resolved):
            self.log.debug(f"Override input for {resolved.value} unchanged ({minutes}); keeping current source")
            return False
        self.set_override(resolved, minutes)
        return True

    def clear_overrides(self) -> None:
        self.overrides.clear()

    def request_reset(self) -> None:
        """First step of a reset; nothing changes until confirm_reset()."""
        self._reset_pending = True
        self.log.debug("Reset requested; awaiting confirmation")

    def cancel_reset(self) -> None:
        self._reset_pending = False

    @property
    def reset_pending(self) -> bool:
        return self._reset_pending

    def confirm_reset(self) -> None:
        """Second step of a reset.

        Raises:
            ResetNotRequestedError: If request_reset() was not called first
        """
        if not self._reset_pending:
            raise ResetNotRequestedError("RESET_NOT_REQUESTED", ["confirm_reset() called without request_reset()"])
        self._reset_pending = False
        self.reset_all()

    def reset_all(self) -> None:
        """Uncredit every event and drop every override in one step."""
        self.selection.clear_all()
        self.overrides.clear()
        self.log.info(f"Reset all credits for '{self.registry.catalog.name}'")

    # Derived reads

    def aggregate(self) -> dict[TimeCategory, int]:
        return compute_aggregate(self.registry.phases, self.categories)

    def effective_total(self, category: TimeCategory | str) -> int:
        resolved = self.registry.require_category(category)
        return self.overrides.effective_total(resolved, self.aggregate())

    def credited_totals(self) -> dict[TimeCategory, int]:
        """Aggregate with overrides applied, per tracked category."""
        return self.overrides.merge(self.aggregate())

    def remaining(self) -> dict[TimeCategory, int]:
        return compute_remaining(self.credited_totals(), self.registry.requirements(), self.categories)

    def over_credited(self) -> set[TimeCategory]:
        return over_credited(self.credited_totals(), self.registry.requirements(), self.categories)

    def phase_state(self, phase_id: str) -> PhaseState:
        return phase_state(self.registry.get_phase(phase_id))

    def summary(self) -> CreditSummary:
        aggregate = self.aggregate()
        requirements = self.registry.requirements()

        category_rows: list[CategorySummary] = []
        for category in self.categories:
            effective = self.overrides.effective_total(category, aggregate)
            requirement = requirements[category]
            category_rows.append(
                CategorySummary(
                    category=category,
                    label=category_info(category).label,
                    requirement=requirement,
                    aggregate=aggregate[category],
                    override=self.overrides.get(category),
                    effective=effective,
                    remaining=remaining_minutes(requirement, effective),
                    completion_percent=completion_percent(effective, requirement),
                    over_credited=effective > requirement,
                )
            )

        phase_rows = [
            PhaseSummary(
                id=phase.id,
                name=phase.name,
                state=phase_state(phase),
                credited_count=phase.credited_count,
                event_count=len(phase.events),
                progress_percent=phase.progress_percent,
                totals=phase_totals(phase, self.categories),
                credited_totals=phase_credited_totals(phase, self.categories),
            )
            for phase in self.registry.phases
        ]

        total_events = sum(row.event_count for row in phase_rows)
        credited_events = sum(row.credited_count for row in phase_rows)
        return CreditSummary(
            categories=category_rows,
            phases=phase_rows,
            total_events=total_events,
            credited_events=credited_events,
            progress_percent=(credited_events / total_events * 100) if total_events else 0.0,
            reset_pending=self._reset_pending,
        )
