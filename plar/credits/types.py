"""Credit engine input models.

This module defines the catalog structures loaded at session start:
- Training events with fixed per-category minutes and a credited flag
- Phases grouping events in syllabus order
- The syllabus catalog with its tracked categories and requirements

Only `TrainingEvent.credited` changes after load. Everything else is
structurally immutable for the session.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from plar.credits.categories import TimeCategory


class PhaseState(StrEnum):
    """Tri-state bulk selection of a phase."""

    ALL = "all"
    NONE = "none"
    PARTIAL = "partial"


class TrainingEvent(BaseModel):
    """A lesson with fixed per-category minutes.

    Attributes:
        id: Unique event identifier across the catalog (e.g., "inst01")
        name: Display name (e.g., "INST 01")
        description: Optional subtitle (e.g., "Partial Panel")
        minutes: Minutes per category; a missing category means 0
        credited: Whether prior experience satisfies this event
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    minutes: dict[TimeCategory, NonNegativeInt] = Field(default_factory=dict)
    credited: bool = False

    def minutes_for(self, category: TimeCategory) -> int:
        return self.minutes.get(category, 0)


class Phase(BaseModel):
    """An ordered group of training events (a syllabus section).

    Membership is fixed at load. Credited count and state are derived.
    """

    id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    events: tuple[TrainingEvent, ...] = ()

    @property
    def credited_count(self) -> int:
        return sum(1 for event in self.events if event.credited)

    @property
    def progress_percent(self) -> float:
        if not self.events:
            return 0.0
        return self.credited_count / len(self.events) * 100


class SyllabusCatalog(BaseModel):
    """Everything a credit session is loaded from.

    Attributes:
        name: Syllabus name (e.g., "ME-IR Training")
        categories: Tracked categories in display order
        requirements: Required minutes per category; missing means 0
        phases: Phases in syllabus order
    """

    name: str = ""
    categories: tuple[TimeCategory, ...]
    requirements: dict[TimeCategory, NonNegativeInt] = Field(default_factory=dict)
    phases: tuple[Phase, ...] = ()
